"""
Construction options for the codec wrappers

Options are validated up front so a typo such as ``use_bin_typ=True`` fails
when the packer is built instead of being silently ignored.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PackerOptions(BaseModel):
    """Options forwarded to msgpack.Packer"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    use_bin_type: bool = Field(default=True, description="Use the bin family for bytes")
    use_single_float: bool = Field(default=False, description="Pack floats as float 32")
    strict_types: bool = Field(default=False, description="Do not pack subclasses of builtins natively")
    unicode_errors: Optional[str] = Field(default=None, description="Error handler for str encoding")

    def to_msgpack_kwargs(self) -> Dict[str, Any]:
        return self.model_dump()


class UnpackerOptions(BaseModel):
    """Options forwarded to msgpack.Unpacker, plus extpack's own ext policy"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: bool = Field(default=False, description="Return str payloads as bytes")
    use_list: bool = Field(default=True, description="Decode arrays as list instead of tuple")
    strict_map_key: bool = Field(default=True, description="Only allow str and bytes map keys")
    max_buffer_size: int = Field(
        default=100 * 1024 * 1024,
        ge=0,
        description="Upper bound on buffered input; 0 selects msgpack's own limit",
    )
    allow_unknown_ext: bool = Field(
        default=False,
        description="Return ExtType for unregistered codes instead of raising",
    )

    def to_msgpack_kwargs(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"allow_unknown_ext"})


__all__ = ["PackerOptions", "UnpackerOptions"]
