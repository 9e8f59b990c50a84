"""
Option records accepted by Factory.register_type
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TypeRegistrationOptions(BaseModel):
    """
    Third argument of Factory.register_type

    Both hooks are optional; a missing hook leaves that direction unset.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True, frozen=True)

    packer: Optional[Any] = Field(default=None, description="Encode hook: method name or callable")
    unpacker: Optional[Any] = Field(default=None, description="Decode hook: method name or callable")


__all__ = ["TypeRegistrationOptions"]
