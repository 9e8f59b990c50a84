"""
Configuration and registry for global settings

Provides the default Factory and environment driven defaults used by the
module level pack/unpack helpers.
"""

from extpack.core.config.registry import (
    ConfigRegistry,
    get_config,
    get_default_factory,
    set_default_factory,
    register_type,
    set_allow_unknown_ext,
    get_allow_unknown_ext,
    clear_config,
)

__all__ = [
    "ConfigRegistry",
    "get_config",
    "get_default_factory",
    "set_default_factory",
    "register_type",
    "set_allow_unknown_ext",
    "get_allow_unknown_ext",
    "clear_config",
]
