"""Kernel – framework-agnostic value objects and errors."""

from mp_authz.kernel.errors import (
    AccessDeniedError,
    BaseError,
    ConfigError,
    InvalidConfigurationError,
    UnsupportedAttributeError,
)

__all__ = [
    "AccessDeniedError",
    "BaseError",
    "ConfigError",
    "InvalidConfigurationError",
    "UnsupportedAttributeError",
]
