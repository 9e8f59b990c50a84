"""
Global configuration registry for extpack

Holds the process-wide default Factory used by the module level helpers
(extpack.pack, extpack.unpack, extpack.register_type, @ext_type) together with
defaults read from the environment.

Environment variables:
    EXTPACK_ALLOW_UNKNOWN_EXT: "1", "true" or "yes" makes unpackers built by
        the module level helpers return ExtType for unregistered codes
    EXTPACK_LOG_LEVEL: level of the extpack loggers (read by get_logger)
"""

import os
from typing import Any

from extpack.core.factory import Factory
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class ConfigRegistry:
    """
    Global configuration registry

    This class manages:
    - The default Factory
    - The default unknown-ext policy of the module level unpack helper
    """

    def __init__(self):
        """Initialize with a fresh default factory"""
        self._default_factory = Factory()
        self._allow_unknown_ext: bool = _env_flag("EXTPACK_ALLOW_UNKNOWN_EXT")

    def get_default_factory(self) -> Factory:
        return self._default_factory

    def set_default_factory(self, factory: Factory) -> None:
        """
        Replace the default factory

        Raises:
            TypeError: If factory is not a Factory
        """
        if not isinstance(factory, Factory):
            raise TypeError(f"factory must be a Factory, got {type(factory).__name__}")
        self._default_factory = factory
        logger.debug(f"Set default factory: {factory!r}")

    def set_allow_unknown_ext(self, allow: bool) -> None:
        self._allow_unknown_ext = bool(allow)
        logger.debug(f"Set allow_unknown_ext: {allow}")

    def get_allow_unknown_ext(self) -> bool:
        return self._allow_unknown_ext

    def clear(self) -> None:
        """Reset to a fresh default factory and re-read the environment (useful for testing)"""
        self._default_factory = Factory()
        self._allow_unknown_ext = _env_flag("EXTPACK_ALLOW_UNKNOWN_EXT")
        logger.debug("Cleared configuration registry")


# Global registry instance (singleton pattern)
_global_registry = ConfigRegistry()


def get_config() -> ConfigRegistry:
    """
    Get the current configuration registry

    Returns:
        ConfigRegistry instance
    """
    return _global_registry


def get_default_factory() -> Factory:
    """
    Get the process-wide default factory

    Returns:
        Factory used by the module level helpers
    """
    return _global_registry.get_default_factory()


def set_default_factory(factory: Factory) -> None:
    _global_registry.set_default_factory(factory)


def register_type(*args: Any, **options: Any) -> None:
    """
    Register an extension type on the default factory

    Same forms and errors as Factory.register_type.
    """
    _global_registry.get_default_factory().register_type(*args, **options)


def set_allow_unknown_ext(allow: bool) -> None:
    _global_registry.set_allow_unknown_ext(allow)


def get_allow_unknown_ext() -> bool:
    return _global_registry.get_allow_unknown_ext()


def clear_config() -> None:
    """Clear all global configuration"""
    _global_registry.clear()


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
