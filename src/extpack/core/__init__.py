"""
Core modules of extpack

- core.extensions: hooks, registries and registration validation
- core.codec: Packer/Unpacker wrappers around msgpack
- core.factory: Factory
- core.config: default factory and environment driven settings
"""

from extpack.core.errors import (
    ExtPackError,
    ArityError,
    ExtTypeRangeError,
    TypeMismatchError,
    HookResolutionError,
    UnsetHookError,
    UnknownExtTypeError,
    MalformedFormatError,
)
from extpack.core.codec import Packer, Unpacker, PackerOptions, UnpackerOptions
from extpack.core.factory import Factory
from extpack.core.config import (
    get_config,
    get_default_factory,
    set_default_factory,
    register_type,
    clear_config,
)
from extpack.core.decorators import ext_type

__all__ = [
    "ExtPackError",
    "ArityError",
    "ExtTypeRangeError",
    "TypeMismatchError",
    "HookResolutionError",
    "UnsetHookError",
    "UnknownExtTypeError",
    "MalformedFormatError",
    "Packer",
    "Unpacker",
    "PackerOptions",
    "UnpackerOptions",
    "Factory",
    "get_config",
    "get_default_factory",
    "set_default_factory",
    "register_type",
    "clear_config",
    "ext_type",
]
