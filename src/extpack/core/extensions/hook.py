"""
Hook normalization

User code can hand the factory an encode/decode hook in several shapes: a
method name, a function or bound method, or any callable object. All of them
are normalized into one of two immutable hook types which share a single
invocation contract (``hook(*args)``) used by both the packer and unpacker:

- NamedMethodHook: a method looked up by name when the hook is invoked
- CallableHook: an already-bound callable
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from extpack.core.errors import HookResolutionError, TypeMismatchError


@dataclass(frozen=True)
class NamedMethodHook:
    """
    Hook resolved by method name at call time

    Without an owner the method is looked up on the first call argument,
    so ``NamedMethodHook("to_msgpack_ext")(point)`` calls
    ``point.to_msgpack_ext()``. With an owner it is looked up on the owner,
    so ``NamedMethodHook("from_msgpack_ext", Point)(data)`` calls
    ``Point.from_msgpack_ext(data)``.

    Attributes:
        name: Method name
        owner: Type the method is resolved on, or None for instance-level hooks
    """

    name: str
    owner: Optional[type] = None

    def __call__(self, *args: Any) -> Any:
        if self.owner is not None:
            return getattr(self.owner, self.name)(*args)
        if not args:
            raise TypeError(f"instance-level hook '{self.name}' needs a receiver")
        receiver, *rest = args
        return getattr(receiver, self.name)(*rest)

    def __repr__(self) -> str:
        if self.owner is None:
            return f"<NamedMethodHook(:{self.name})>"
        return f"<NamedMethodHook({self.owner.__name__}.{self.name})>"


@dataclass(frozen=True)
class CallableHook:
    """
    Hook wrapping an already-bound callable

    Attributes:
        func: Function, bound method, class, or any object defining __call__
    """

    func: Callable[..., Any]

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", None) or type(self.func).__name__
        return f"<CallableHook({name})>"


Hook = Union[NamedMethodHook, CallableHook]


def to_packer_hook(source: Any) -> Optional[Hook]:
    """
    Normalize an encode hook source

    Args:
        source: None, a method name, or a callable

    Returns:
        Normalized hook, or None when source is None (direction left unset)

    Raises:
        TypeMismatchError: If source can not be turned into a callable
    """
    if source is None:
        return None
    if isinstance(source, (NamedMethodHook, CallableHook)):
        return source
    if isinstance(source, str):
        return NamedMethodHook(source)
    if callable(source):
        return CallableHook(source)
    raise TypeMismatchError(
        f"packer must be a method name or a callable, "
        f"got {type(source).__name__}"
    )


def to_unpacker_hook(source: Any, owner: type) -> Optional[Hook]:
    """
    Normalize a decode hook source

    A method name is bound to ``owner`` and must exist on it right away.
    Anything else must be callable.

    Args:
        source: None, a method name on owner, or a callable
        owner: The type the hook produces

    Returns:
        Normalized hook, or None when source is None (direction left unset)

    Raises:
        HookResolutionError: If the named method is missing on owner
        TypeMismatchError: If source can not be turned into a callable
    """
    if source is None:
        return None
    if isinstance(source, (NamedMethodHook, CallableHook)):
        return source
    if isinstance(source, str):
        method = getattr(owner, source, None)
        if method is None or not callable(method):
            raise HookResolutionError(
                f"undefined method '{source}' for class '{owner.__name__}'"
            )
        return NamedMethodHook(source, owner)
    if callable(source):
        return CallableHook(source)
    raise TypeMismatchError(
        f"unpacker must be a method name or a callable, "
        f"got {type(source).__name__}"
    )


def hook_label(hook: Optional[Hook]) -> str:
    """Short human readable description of a hook, used in logs and the CLI"""
    if hook is None:
        return "-"
    if isinstance(hook, NamedMethodHook):
        return hook.name if hook.owner is None else f"{hook.owner.__name__}.{hook.name}"
    return getattr(hook.func, "__qualname__", None) or type(hook.func).__name__


__all__ = [
    "Hook",
    "NamedMethodHook",
    "CallableHook",
    "to_packer_hook",
    "to_unpacker_hook",
    "hook_label",
]
