"""
Extension type system for extpack

Hooks, the encode/decode registries, and the argument validation shared by
Factory.register_type and the codec wrappers.
"""

from extpack.core.extensions.hook import (
    Hook,
    NamedMethodHook,
    CallableHook,
    to_packer_hook,
    to_unpacker_hook,
)
from extpack.core.extensions.options import TypeRegistrationOptions
from extpack.core.extensions.registry import (
    PackerExtEntry,
    UnpackerExtEntry,
    PackerExtRegistry,
    UnpackerExtRegistry,
    type_token,
)
from extpack.core.extensions.validation import (
    validate_ext_code,
    validate_ext_class,
    validate_registration_options,
)

__all__ = [
    "Hook",
    "NamedMethodHook",
    "CallableHook",
    "to_packer_hook",
    "to_unpacker_hook",
    "TypeRegistrationOptions",
    "PackerExtEntry",
    "UnpackerExtEntry",
    "PackerExtRegistry",
    "UnpackerExtRegistry",
    "type_token",
    "validate_ext_code",
    "validate_ext_class",
    "validate_registration_options",
]
