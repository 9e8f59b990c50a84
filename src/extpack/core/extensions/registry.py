"""
Extension type registries

Two registries back every Factory and every codec instance:

- PackerExtRegistry: application type -> (code, encode hook)
- UnpackerExtRegistry: code -> decode hook

Both are plain insertion-ordered mappings with last-write-wins semantics.
They never validate their input; the Factory validates before calling put().

Architecture:
- The encode side is keyed by a stable per-type integer token rather than by
  the type object itself (see type_token())
- duplicate() copies storage out; entries and hooks are immutable, so a
  shallow copy of the mapping is a full snapshot
- destroy() drops every owned reference; a destroyed registry rejects put()
"""

import itertools
import threading
import weakref
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from extpack.core.extensions.hook import Hook
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Type identity tokens
# ============================================================================

_type_tokens: "weakref.WeakKeyDictionary[type, int]" = weakref.WeakKeyDictionary()
_token_counter = itertools.count(1)
_token_lock = threading.Lock()


def type_token(cls: type) -> int:
    """
    Get the stable token of a type, assigning one on first use

    Tokens are process-wide and never reused while the type is alive.

    Args:
        cls: Any class

    Returns:
        Positive integer token
    """
    with _token_lock:
        token = _type_tokens.get(cls)
        if token is None:
            token = next(_token_counter)
            _type_tokens[cls] = token
        return token


def find_type_token(cls: type) -> Optional[int]:
    """Get the token of a type without assigning one"""
    return _type_tokens.get(cls)


# ============================================================================
# Entries
# ============================================================================

@dataclass(frozen=True)
class PackerExtEntry:
    """
    Encode side entry

    Attributes:
        associated_type: Registered application type
        type_id: Token of associated_type
        code: Extension type code
        hook: Encode hook, or None if this direction is unset
    """

    associated_type: type
    type_id: int
    code: int
    hook: Optional[Hook]


@dataclass(frozen=True)
class UnpackerExtEntry:
    """
    Decode side entry

    Attributes:
        code: Extension type code
        hook: Decode hook, or None if this direction is unset
    """

    code: int
    hook: Optional[Hook]


# ============================================================================
# Registries
# ============================================================================

class _ExtRegistryBase:
    """Storage, lifetime and iteration shared by both registry sides"""

    def __init__(self):
        self._entries: Dict[int, Any] = {}
        self._destroyed = False

    def _check_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError(f"{type(self).__name__} has been destroyed")

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """
        Release every owned type and hook reference

        Safe to call more than once. The registry can not be used for
        registration afterwards.
        """
        if self._destroyed:
            return
        count = len(self._entries)
        self._entries.clear()
        self._destroyed = True
        logger.debug(f"Destroyed {type(self).__name__} ({count} entries released)")

    def entries(self) -> List[Any]:
        """Entries in registration order"""
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries.values()))


class PackerExtRegistry(_ExtRegistryBase):
    """
    Encode side registry: application type -> code and encode hook

    Example:
        registry = PackerExtRegistry()
        registry.put(Point, 1, CallableHook(encode_point))
        entry = registry.lookup(Point)
    """

    _entries: Dict[int, PackerExtEntry]

    def put(self, associated_type: type, code: int, hook: Optional[Hook]) -> None:
        """
        Insert or overwrite the entry for associated_type

        Args:
            associated_type: Application type
            code: Extension type code (already validated by the caller)
            hook: Encode hook or None
        """
        self._check_alive()
        token = type_token(associated_type)
        self._entries[token] = PackerExtEntry(associated_type, token, code, hook)

    def lookup(self, cls: type) -> Optional[PackerExtEntry]:
        """
        Get the entry registered for exactly cls

        Subclasses of a registered type do not match.
        """
        token = find_type_token(cls)
        if token is None:
            return None
        return self._entries.get(token)

    def get(self, code: int) -> Optional[PackerExtEntry]:
        """Get the most recently registered entry using code"""
        for entry in reversed(list(self._entries.values())):
            if entry.code == code:
                return entry
        return None

    def duplicate(self) -> "PackerExtRegistry":
        """
        Create an independent copy of this registry

        Later put() calls on either registry do not affect the other.
        """
        self._check_alive()
        dup = PackerExtRegistry()
        dup._entries = dict(self._entries)
        return dup

    def references(self) -> Iterator[Any]:
        """Every type and hook object this registry keeps alive"""
        for entry in self._entries.values():
            yield entry.associated_type
            if entry.hook is not None:
                yield entry.hook

    def __contains__(self, cls: object) -> bool:
        return isinstance(cls, type) and self.lookup(cls) is not None


class UnpackerExtRegistry(_ExtRegistryBase):
    """
    Decode side registry: code -> decode hook
    """

    _entries: Dict[int, UnpackerExtEntry]

    def put(self, code: int, hook: Optional[Hook]) -> None:
        """
        Insert or overwrite the entry for code

        Args:
            code: Extension type code (already validated by the caller)
            hook: Decode hook or None
        """
        self._check_alive()
        self._entries[code] = UnpackerExtEntry(code, hook)

    def lookup(self, code: int) -> Optional[UnpackerExtEntry]:
        return self._entries.get(code)

    def duplicate(self) -> "UnpackerExtRegistry":
        """
        Create an independent copy of this registry

        Later put() calls on either registry do not affect the other.
        """
        self._check_alive()
        dup = UnpackerExtRegistry()
        dup._entries = dict(self._entries)
        return dup

    def references(self) -> Iterator[Any]:
        """Every hook object this registry keeps alive"""
        for entry in self._entries.values():
            if entry.hook is not None:
                yield entry.hook

    def __contains__(self, code: object) -> bool:
        return code in self._entries


__all__ = [
    "type_token",
    "find_type_token",
    "PackerExtEntry",
    "UnpackerExtEntry",
    "PackerExtRegistry",
    "UnpackerExtRegistry",
]
