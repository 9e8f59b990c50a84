"""
Helpers for building msgpack ext values
"""

from typing import Any

from msgpack import ExtType

from extpack.core.errors import TypeMismatchError


def make_ext_type(code: int, data: bytes) -> ExtType:
    """
    Build an ExtType for any signed byte code

    msgpack.ExtType only accepts 0..127 because negative codes are reserved
    for predefined types, but the packers write any signed byte.
    """
    if 0 <= code <= 127:
        return ExtType(code, data)
    return tuple.__new__(ExtType, (code, data))


def to_payload(value: Any, code: int) -> bytes:
    """
    Coerce an encode hook result into ext payload bytes

    Raises:
        TypeMismatchError: If the hook returned something that is not bytes-like
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeMismatchError(
        f"packer hook for extension type {code} must return bytes, "
        f"got {type(value).__name__}"
    )


__all__ = ["make_ext_type", "to_payload"]
