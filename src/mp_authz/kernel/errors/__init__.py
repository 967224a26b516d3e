"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── AccessDeniedError
    └── ConfigError
        ├── InvalidConfigurationError
        │   └── UnsupportedAttributeError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mp_authz.kernel.errors.access import (
    AccessDeniedError,
    ConfigError,
    InvalidConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedAttributeError,
)
from mp_authz.kernel.errors.base import BaseError

__all__ = [
    "AccessDeniedError",
    "BaseError",
    "ConfigError",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAttributeError",
]
