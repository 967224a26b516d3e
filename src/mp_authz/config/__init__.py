"""Config – 12-factor settings for the decision engine."""

from mp_authz.config.factory import build_decision_manager
from mp_authz.config.settings import (
    AccessDecisionSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from mp_authz.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "AccessDecisionSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "build_decision_manager",
]
