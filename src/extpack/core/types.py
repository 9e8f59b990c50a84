"""
Core type definitions for extpack

Shared aliases and constants used by the registries, the codec wrappers and
the factory. Kept in one module to avoid circular imports between them.
"""

from typing import Any, Callable, Literal


# ============================================================================
# Type Aliases
# ============================================================================

PackerHookFunc = Callable[[Any], bytes]
"""
Encode hook signature: receives the application value, returns the ext payload.

Example:
    def encode_point(point: Point) -> bytes:
        return struct.pack(">ii", point.x, point.y)
"""

UnpackerHookFunc = Callable[[bytes], Any]
"""
Decode hook signature: receives the ext payload, returns the application value.

Example:
    def decode_point(data: bytes) -> Point:
        return Point(*struct.unpack(">ii", data))
"""

RegistrySelector = Literal["packer", "unpacker", "both"]


# ============================================================================
# Extension type code range
# ============================================================================

# The ext type tag is a single signed byte on the wire.
EXT_CODE_MIN = -128
EXT_CODE_MAX = 127

DEFAULT_PACKER_METHOD = "to_msgpack_ext"
DEFAULT_UNPACKER_METHOD = "from_msgpack_ext"


def is_valid_ext_code(code: int) -> bool:
    """Check whether code fits the signed byte ext tag"""
    return EXT_CODE_MIN <= code <= EXT_CODE_MAX


__all__ = [
    "PackerHookFunc",
    "UnpackerHookFunc",
    "RegistrySelector",
    "EXT_CODE_MIN",
    "EXT_CODE_MAX",
    "DEFAULT_PACKER_METHOD",
    "DEFAULT_UNPACKER_METHOD",
    "is_valid_ext_code",
]
