"""
Packer: MessagePack writer aware of registered extension types

Byte-level encoding is done by msgpack.Packer. This class owns the ext
registry and turns registered application values into ext frames through
msgpack's ``default`` callback.
"""

from typing import Any, BinaryIO, Optional, Union

import msgpack

from extpack.core.codec.ext import make_ext_type, to_payload
from extpack.core.codec.options import PackerOptions
from extpack.core.errors import UnsetHookError
from extpack.core.extensions.hook import to_packer_hook
from extpack.core.extensions.registry import PackerExtRegistry
from extpack.core.extensions.validation import validate_ext_class, validate_ext_code
from extpack.core.types import PackerHookFunc


class Packer:
    """
    Buffered MessagePack writer

    Values whose exact type is registered in ``ext_registry`` are written as
    ext frames. With ``strict_types=False`` (the default) msgpack packs
    subclasses of builtins such as int or dict natively, so registering such
    a subclass only takes effect with ``strict_types=True``.

    Example:
        packer = Packer()
        packer.register_type(1, Point, encode_point)
        data = packer.write(Point(3, 4)).to_bytes()

    Args:
        io: Optional binary stream written to by flush()
        **options: See PackerOptions
    """

    def __init__(self, io: Optional[BinaryIO] = None, **options: Any):
        self._options = PackerOptions(**options)
        self.io = io
        self.ext_registry = PackerExtRegistry()
        self._buffer = bytearray()
        self._packer = msgpack.Packer(
            default=self._default,
            autoreset=True,
            **self._options.to_msgpack_kwargs(),
        )

    @property
    def options(self) -> PackerOptions:
        return self._options

    def _default(self, obj: Any) -> Any:
        entry = self.ext_registry.lookup(type(obj))
        if entry is None:
            raise TypeError(f"can not serialize {type(obj).__name__!r} object")
        if entry.hook is None:
            raise UnsetHookError(
                f"extension type {entry.code} ({entry.associated_type.__name__}) "
                f"was registered without a packer"
            )
        return make_ext_type(entry.code, to_payload(entry.hook(obj), entry.code))

    def register_type(self, code: int, cls: type, hook: Union[str, PackerHookFunc]) -> None:
        """
        Register an encode hook on this packer only

        Args:
            code: Extension type code
            cls: Application type
            hook: Callable taking the value, or the name of a method on it
        """
        code = validate_ext_code(code)
        cls = validate_ext_class(cls)
        self.ext_registry.put(cls, code, to_packer_hook(hook))

    def write(self, obj: Any) -> "Packer":
        """
        Append one object to the buffer

        A failed write leaves the buffer as it was.
        """
        self._buffer += self._packer.pack(obj)
        return self

    pack = write

    def write_ext(self, code: int, payload: bytes) -> "Packer":
        """Append a raw ext frame"""
        code = validate_ext_code(code)
        self._buffer += self._packer.pack(make_ext_type(code, to_payload(payload, code)))
        return self

    def write_nil(self) -> "Packer":
        return self.write(None)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    @property
    def size(self) -> int:
        return len(self._buffer)

    @property
    def empty(self) -> bool:
        return not self._buffer

    def reset(self) -> None:
        self._buffer.clear()

    clear = reset

    def flush(self) -> "Packer":
        """Write buffered bytes to io and empty the buffer (no-op without io)"""
        if self.io is not None and self._buffer:
            self.io.write(bytes(self._buffer))
            self._buffer.clear()
        return self

    def __repr__(self) -> str:
        return f"<Packer(size={self.size}, ext_types={len(self.ext_registry)})>"


__all__ = ["Packer"]
