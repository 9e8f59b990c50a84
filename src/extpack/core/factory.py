"""
Factory: owner of the extension type registries

A Factory collects extension type registrations and hands out Packer and
Unpacker instances preloaded with a snapshot of them.

Example:
    factory = Factory()
    factory.register_type(1, Point, {"packer": encode_point, "unpacker": decode_point})

    data = factory.packer().write(Point(3, 4)).to_bytes()
    point = factory.unpacker().feed(data).read()

Snapshot isolation:
    Every codec instance gets its own duplicate of the registry as it was at
    construction time. Registering more types on the factory afterwards does
    not change codecs that already exist; codecs built later see them.

Thread safety:
    register_type() mutates the factory in place without locking. Callers that
    register from several threads must serialize those calls themselves.
    Codec instances share no registry storage with the factory.
"""

from typing import Any, Dict, List, Optional

from extpack.core.codec.packer import Packer
from extpack.core.codec.unpacker import Unpacker
from extpack.core.errors import ArityError
from extpack.core.extensions.hook import (
    Hook,
    NamedMethodHook,
    hook_label,
    to_packer_hook,
    to_unpacker_hook,
)
from extpack.core.extensions.registry import PackerExtRegistry, UnpackerExtRegistry
from extpack.core.extensions.validation import (
    validate_ext_class,
    validate_ext_code,
    validate_registration_options,
)
from extpack.core.types import (
    DEFAULT_PACKER_METHOD,
    DEFAULT_UNPACKER_METHOD,
    RegistrySelector,
)
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)

_SELECTORS = ("packer", "unpacker", "both")


class Factory:
    """
    Extension type registry and codec factory

    Attributes:
        packer_options: Reserved for future packer configuration (always empty)
        unpacker_options: Reserved for future unpacker configuration (always empty)
    """

    def __init__(self, *args: Any, **kwargs: Any):
        """
        Create an empty factory

        Raises:
            ArityError: If any argument is given (options are not supported yet)
        """
        if args or kwargs:
            raise ArityError(
                f"wrong number of arguments ({len(args) + len(kwargs)} for 0)"
            )
        self.packer_options: Dict[str, Any] = {}
        self.unpacker_options: Dict[str, Any] = {}
        self._packer_registry = PackerExtRegistry()
        self._unpacker_registry = UnpackerExtRegistry()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_type(self, *args: Any, **options: Any) -> None:
        """
        Register an extension type

        Forms:
            register_type(code, cls)
                Encode with ``obj.to_msgpack_ext()`` and decode with
                ``cls.from_msgpack_ext(data)``, both looked up when used.
            register_type(code, cls, {"packer": ..., "unpacker": ...})
            register_type(code, cls, packer=..., unpacker=...)
                ``packer`` is a callable taking the value, or the name of a
                method on the value. ``unpacker`` is a callable taking the
                payload, or the name of a method on ``cls``. A missing hook
                leaves that direction unset.

        Every argument is validated before either registry is touched, so a
        failed call leaves the factory unchanged. Registering a type or code
        again replaces the previous hooks.

        Args:
            *args: code, cls and optionally an options mapping
            **options: packer/unpacker, in place of the options mapping

        Raises:
            ArityError: If not called with 2 or 3 arguments
            ExtTypeRangeError: If code is outside [-128, 127]
            TypeMismatchError: If cls is not a concrete class, options is not
                a mapping, or a hook is neither a name nor a callable
            HookResolutionError: If the unpacker names a method cls lacks
        """
        if options:
            if len(args) != 2:
                raise ArityError(
                    f"wrong number of arguments ({len(args) + 1} for 2..3)"
                )
            args = (*args, options)

        if len(args) not in (2, 3):
            raise ArityError(f"wrong number of arguments ({len(args)} for 2..3)")

        code = validate_ext_code(args[0])
        ext_class = validate_ext_class(args[1])

        if len(args) == 2:
            packer_hook: Optional[Hook] = NamedMethodHook(DEFAULT_PACKER_METHOD)
            unpacker_hook: Optional[Hook] = NamedMethodHook(DEFAULT_UNPACKER_METHOD, ext_class)
        else:
            parsed = validate_registration_options(args[2])
            packer_hook = to_packer_hook(parsed.packer)
            unpacker_hook = to_unpacker_hook(parsed.unpacker, ext_class)

        # Validation is complete; neither put() can fail from here on
        self._packer_registry.put(ext_class, code, packer_hook)
        self._unpacker_registry.put(code, unpacker_hook)

        logger.debug(
            f"Registered extension type {code} for {ext_class.__name__} "
            f"(packer: {hook_label(packer_hook)}, unpacker: {hook_label(unpacker_hook)})"
        )

    def registered_types(self, selector: RegistrySelector = "both") -> List[Dict[str, Any]]:
        """
        Describe the registered extension types

        Args:
            selector: "packer", "unpacker" or "both"

        Returns:
            List of dicts sorted by code. Keys: "type" (code), "class", and
            "packer" and/or "unpacker" (Hook or None) depending on selector.

        Raises:
            ValueError: If selector is unknown
        """
        if selector not in _SELECTORS:
            raise ValueError(f"invalid selector {selector!r}, expected one of {_SELECTORS}")

        packer_entries = self._packer_registry.entries()
        unpacker_entries = {entry.code: entry for entry in self._unpacker_registry.entries()}
        result: List[Dict[str, Any]] = []

        if selector == "packer":
            for entry in packer_entries:
                result.append({"type": entry.code, "class": entry.associated_type, "packer": entry.hook})
        elif selector == "unpacker":
            for code, entry in unpacker_entries.items():
                result.append({"type": code, "class": self._class_for_code(code, entry.hook), "unpacker": entry.hook})
        else:
            remaining = dict(unpacker_entries)
            for entry in packer_entries:
                unpacker_entry = remaining.get(entry.code)
                unpacker_hook = None
                if unpacker_entry is not None and self._class_for_code(entry.code, unpacker_entry.hook) is entry.associated_type:
                    unpacker_hook = remaining.pop(entry.code).hook
                result.append({
                    "type": entry.code,
                    "class": entry.associated_type,
                    "packer": entry.hook,
                    "unpacker": unpacker_hook,
                })
            for code, entry in remaining.items():
                result.append({
                    "type": code,
                    "class": self._class_for_code(code, entry.hook),
                    "packer": None,
                    "unpacker": entry.hook,
                })

        result.sort(key=lambda item: item["type"])
        return result

    def _class_for_code(self, code: int, hook: Optional[Hook]) -> Optional[type]:
        if isinstance(hook, NamedMethodHook) and hook.owner is not None:
            return hook.owner
        packer_entry = self._packer_registry.get(code)
        return packer_entry.associated_type if packer_entry else None

    def is_type_registered(self, class_or_code: Any, selector: RegistrySelector = "both") -> bool:
        """
        Check whether a class (exact match) or a code is registered

        Args:
            class_or_code: A class or an integer code
            selector: "packer", "unpacker" or "both"
        """
        entries = self.registered_types(selector)
        if isinstance(class_or_code, type):
            return any(entry["class"] is class_or_code for entry in entries)
        return any(entry["type"] == class_or_code for entry in entries)

    # ------------------------------------------------------------------
    # Codec construction
    # ------------------------------------------------------------------

    def packer(self, *args: Any, **kwargs: Any) -> Packer:
        """
        Build a Packer holding a snapshot of the encode registry

        Args are forwarded to Packer(); its construction errors propagate.
        """
        packer = Packer(*args, **kwargs)
        packer.ext_registry.destroy()
        packer.ext_registry = self._packer_registry.duplicate()
        logger.debug(f"Created packer with {len(packer.ext_registry)} extension types")
        return packer

    def unpacker(self, *args: Any, **kwargs: Any) -> Unpacker:
        """
        Build an Unpacker holding a snapshot of the decode registry

        Args are forwarded to Unpacker(); its construction errors propagate.
        """
        unpacker = Unpacker(*args, **kwargs)
        unpacker.ext_registry.destroy()
        unpacker.ext_registry = self._unpacker_registry.duplicate()
        logger.debug(f"Created unpacker with {len(unpacker.ext_registry)} extension types")
        return unpacker

    def dump(self, obj: Any, **packer_options: Any) -> bytes:
        """Serialize one object"""
        return self.packer(**packer_options).write(obj).to_bytes()

    def load(self, data: bytes, **unpacker_options: Any) -> Any:
        """
        Deserialize exactly one object

        Raises:
            EOFError: If data is incomplete
            MalformedFormatError: If bytes remain after the object
        """
        return self.unpacker(**unpacker_options).feed(data).full_unpack()

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def copy(self) -> "Factory":
        """Create an independent factory with the same registrations"""
        clone = Factory()
        clone.packer_options = dict(self.packer_options)
        clone.unpacker_options = dict(self.unpacker_options)
        clone._packer_registry = self._packer_registry.duplicate()
        clone._unpacker_registry = self._unpacker_registry.duplicate()
        return clone

    __copy__ = copy

    def __repr__(self) -> str:
        return (
            f"<Factory(packer_types={len(self._packer_registry)}, "
            f"unpacker_types={len(self._unpacker_registry)})>"
        )


__all__ = ["Factory"]
