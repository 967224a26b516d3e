"""Access errors — the deny verdict and decision-engine misconfiguration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from mp_authz.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from mp_authz.voting.policies import VoteTally


class AccessDeniedError(BaseError):
    """The aggregation policy refused access to *resource*.

    A normal business outcome rather than a fault: enforcement points catch
    it and translate it (HTTP 403, RPC PERMISSION_DENIED, ...). The decision
    engine itself never catches it.
    """

    default_code = "access_denied"

    def __init__(
        self,
        resource: Any,
        *,
        subject: str | None = None,
        tally: VoteTally | None = None,
        policy: str | None = None,
        message: str = "Access is denied",
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {"resource": str(resource)}
        if subject is not None:
            detail["subject"] = subject
        if tally is not None:
            detail.update(
                grants=tally.grants,
                denials=tally.denials,
                abstentions=tally.abstentions,
            )
        if policy is not None:
            detail["policy"] = policy
        detail.update(kwargs.pop("detail", None) or {})
        super().__init__(message, detail=detail, **kwargs)
        self.resource = resource
        self.subject = subject
        self.tally = tally
        self.policy = policy


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class InvalidConfigurationError(ConfigError):
    """The decision engine was wired with an unusable configuration.

    Raised at construction time (empty voter list, unknown aggregation
    policy, cyclic role hierarchy), never while deciding.
    """

    default_code = "invalid_configuration"


class UnsupportedAttributeError(InvalidConfigurationError):
    """No configured voter is competent to judge one or more attributes."""

    default_code = "unsupported_attribute"

    def __init__(self, attributes: Iterable[str]) -> None:
        values = list(attributes)
        super().__init__(
            f"Unsupported configuration attributes: {', '.join(values)}",
            detail={"attributes": values},
        )
        self.attributes = values


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "AccessDeniedError",
    "ConfigError",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedAttributeError",
]
