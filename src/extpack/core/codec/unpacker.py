"""
Unpacker: MessagePack reader aware of registered extension types

Byte-level decoding is done by msgpack's pure Python Unpacker; ext frames are
routed to the decode hooks in ``ext_registry`` through msgpack's ``ext_hook``.
msgpack normally decodes code -1 into msgpack.Timestamp without consulting
``ext_hook``. Here -1 is routed like every other code, so its payload reaches
the registered hook byte for byte.
"""

from typing import Any, BinaryIO, Iterator, Optional

from msgpack import fallback
from msgpack.exceptions import FormatError, OutOfData, StackError

from extpack.core.codec.ext import make_ext_type
from extpack.core.codec.options import UnpackerOptions
from extpack.core.errors import (
    ExtPackError,
    MalformedFormatError,
    TypeMismatchError,
    UnknownExtTypeError,
    UnsetHookError,
)
from extpack.core.extensions.hook import CallableHook
from extpack.core.extensions.registry import UnpackerExtRegistry
from extpack.core.extensions.validation import validate_ext_code
from extpack.core.types import UnpackerHookFunc

# Reserved by msgpack for its Timestamp type
TIMESTAMP_EXT_CODE = -1


class _StreamUnpacker(fallback.Unpacker):
    """msgpack.fallback.Unpacker that hands -1 frames to ext_hook"""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._skipping = False

    def _read_header(self, *args: Any, **kwargs: Any):
        typ, n, obj = super()._read_header(*args, **kwargs)
        if typ == fallback.TYPE_EXT and n == TIMESTAMP_EXT_CODE:
            # Decoded here, as an immediate value, before msgpack's
            # timestamp handling sees the frame
            if self._skipping:
                return fallback.TYPE_IMMEDIATE, 0, None
            return fallback.TYPE_IMMEDIATE, 0, self._ext_hook(n, bytes(obj))
        return typ, n, obj

    def skip(self) -> None:
        self._skipping = True
        try:
            super().skip()
        finally:
            self._skipping = False


class Unpacker:
    """
    Streaming MessagePack reader

    Data is either pushed with feed() or pulled from ``io``.

    Example:
        unpacker = Unpacker()
        unpacker.register_type(1, decode_point)
        unpacker.feed(data)
        point = unpacker.read()

    Args:
        io: Optional binary stream to read from
        **options: See UnpackerOptions
    """

    def __init__(self, io: Optional[BinaryIO] = None, **options: Any):
        self._options = UnpackerOptions(**options)
        self.io = io
        self.ext_registry = UnpackerExtRegistry()
        self._fed = 0
        self._hook_error: Optional[BaseException] = None
        self._unpacker = self._new_unpacker()

    def _new_unpacker(self) -> _StreamUnpacker:
        return _StreamUnpacker(
            self.io,
            ext_hook=self._ext_hook,
            **self._options.to_msgpack_kwargs(),
        )

    @property
    def options(self) -> UnpackerOptions:
        return self._options

    def _ext_hook(self, code: int, data: bytes) -> Any:
        entry = self.ext_registry.lookup(code)
        if entry is None:
            if self._options.allow_unknown_ext:
                return make_ext_type(code, data)
            raise UnknownExtTypeError(code)
        if entry.hook is None:
            raise UnsetHookError(f"extension type {code} was registered without an unpacker")
        try:
            return entry.hook(data)
        except Exception as e:
            self._hook_error = e
            raise

    def _unpack_next(self) -> Any:
        """
        Unpack one object, reporting corrupt input as MalformedFormatError

        OutOfData propagates. Errors raised by decode hooks and ExtPackError
        subclasses propagate unchanged.
        """
        self._hook_error = None
        try:
            return self._unpacker.unpack()
        except (FormatError, StackError) as e:
            raise MalformedFormatError(str(e)) from e
        except ValueError as e:
            if isinstance(e, ExtPackError) or e is self._hook_error:
                raise
            raise MalformedFormatError(str(e)) from e
        finally:
            self._hook_error = None

    def register_type(self, code: int, hook: UnpackerHookFunc) -> None:
        """
        Register a decode hook on this unpacker only

        Args:
            code: Extension type code
            hook: Callable taking the ext payload
        """
        code = validate_ext_code(code)
        if not callable(hook):
            raise TypeMismatchError(f"unpacker must be callable, got {type(hook).__name__}")
        self.ext_registry.put(code, CallableHook(hook))

    def feed(self, data: bytes) -> "Unpacker":
        """Append data to the internal buffer"""
        if self.io is not None:
            raise RuntimeError("feed() is not available on an Unpacker reading from io")
        self._unpacker.feed(data)
        self._fed += len(data)
        return self

    def read(self) -> Any:
        """
        Deserialize the next object

        Raises:
            EOFError: If no complete object is available
            MalformedFormatError: If the input is corrupt
        """
        try:
            return self._unpack_next()
        except OutOfData:
            raise EOFError("no complete MessagePack object is buffered") from None

    unpack = read

    def each(self) -> Iterator[Any]:
        """Yield every complete object currently available"""
        while True:
            try:
                obj = self._unpack_next()
            except OutOfData:
                return
            yield obj

    __iter__ = each

    def feed_each(self, data: bytes) -> Iterator[Any]:
        self.feed(data)
        return self.each()

    def tell(self) -> int:
        """Number of input bytes taken by the objects read so far"""
        return self._unpacker.tell()

    @property
    def pending(self) -> int:
        """Fed bytes not yet consumed by a complete object (0 when reading io)"""
        if self.io is not None:
            return 0
        return self._fed - self.tell()

    def full_unpack(self) -> Any:
        """
        Deserialize exactly one object

        Raises:
            EOFError: If the input holds no complete object
            MalformedFormatError: If bytes remain after the object
        """
        obj = self.read()
        try:
            self._unpacker.skip()
        except OutOfData:
            if self.pending == 0:
                return obj
        except ValueError as e:
            raise MalformedFormatError(str(e)) from e
        raise MalformedFormatError("extra bytes follow the first MessagePack object")

    def reset(self) -> None:
        """Drop buffered data; registered types are kept"""
        self._unpacker = self._new_unpacker()
        self._fed = 0

    def __repr__(self) -> str:
        return f"<Unpacker(ext_types={len(self.ext_registry)})>"


__all__ = ["Unpacker", "TIMESTAMP_EXT_CODE"]
