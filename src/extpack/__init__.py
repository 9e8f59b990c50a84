"""
extpack - MessagePack extension type registry and codec factory

Associate application types with one-byte MessagePack extension type codes
and encode/decode hooks, then build packers and unpackers that carry an
independent snapshot of those associations.

Core modules:
- core.factory: Factory (register_type, packer, unpacker)
- core.extensions: hooks and the encode/decode registries
- core.codec: Packer/Unpacker built on the msgpack library
- core.config: the default factory used by the helpers below

Optional:
- cli: ``extpack`` command line tool
"""

__version__ = "0.3.0"

from typing import Any

from extpack.core import (
    ExtPackError,
    ArityError,
    ExtTypeRangeError,
    TypeMismatchError,
    HookResolutionError,
    UnsetHookError,
    UnknownExtTypeError,
    MalformedFormatError,
    Packer,
    Unpacker,
    Factory,
    get_default_factory,
    set_default_factory,
    register_type,
    clear_config,
    ext_type,
)
from extpack.core.config import get_allow_unknown_ext


def pack(obj: Any, **packer_options: Any) -> bytes:
    """
    Serialize one object with the default factory

    Example:
        data = extpack.pack({"origin": Point(0, 0)})
    """
    return get_default_factory().dump(obj, **packer_options)


def unpack(data: bytes, **unpacker_options: Any) -> Any:
    """
    Deserialize exactly one object with the default factory

    ``allow_unknown_ext`` defaults to the EXTPACK_ALLOW_UNKNOWN_EXT setting.
    """
    unpacker_options.setdefault("allow_unknown_ext", get_allow_unknown_ext())
    return get_default_factory().load(data, **unpacker_options)


dump = pack
load = unpack

__all__ = [
    "pack",
    "unpack",
    "dump",
    "load",
    "Factory",
    "Packer",
    "Unpacker",
    "register_type",
    "ext_type",
    "get_default_factory",
    "set_default_factory",
    "clear_config",
    "ExtPackError",
    "ArityError",
    "ExtTypeRangeError",
    "TypeMismatchError",
    "HookResolutionError",
    "UnsetHookError",
    "UnknownExtTypeError",
    "MalformedFormatError",
    "__version__",
]
