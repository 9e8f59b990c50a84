"""
Codec wrappers configured by Factory

Packer and Unpacker delegate byte-level work to the msgpack library and own
the ext registries the factory installs into them.
"""

from extpack.core.codec.options import PackerOptions, UnpackerOptions
from extpack.core.codec.packer import Packer
from extpack.core.codec.unpacker import Unpacker, TIMESTAMP_EXT_CODE

__all__ = [
    "Packer",
    "Unpacker",
    "PackerOptions",
    "UnpackerOptions",
    "TIMESTAMP_EXT_CODE",
]
