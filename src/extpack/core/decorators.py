"""
Extension type registration decorator

Lets a class register itself when its module is imported:

    @ext_type(1)
    class Point:
        def to_msgpack_ext(self) -> bytes: ...

        @classmethod
        def from_msgpack_ext(cls, data: bytes) -> "Point": ...
"""

from typing import Any, Callable, Optional, TypeVar

from extpack.core.config import get_default_factory
from extpack.core.factory import Factory

T = TypeVar("T", bound=type)


def ext_type(
    code: int,
    *,
    packer: Optional[Any] = None,
    unpacker: Optional[Any] = None,
    factory: Optional[Factory] = None,
) -> Callable[[T], T]:
    """
    Register the decorated class as an extension type

    Without hooks the class is registered with the two-argument form, so it
    must provide ``to_msgpack_ext`` and ``from_msgpack_ext``. With any hook the
    three-argument form is used and a missing hook leaves that direction unset.

    Args:
        code: Extension type code
        packer: Encode hook (callable or method name)
        unpacker: Decode hook (callable or method name on the class)
        factory: Target factory (default: the global default factory)

    Returns:
        Class decorator returning the class unchanged
    """

    def decorator(cls: T) -> T:
        target = factory if factory is not None else get_default_factory()
        if packer is None and unpacker is None:
            target.register_type(code, cls)
        else:
            target.register_type(code, cls, {"packer": packer, "unpacker": unpacker})
        return cls

    return decorator


__all__ = ["ext_type"]
