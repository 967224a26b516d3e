"""Config settings – AccessDecisionSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_authz.config.settings.base import Settings
from mp_authz.kernel.errors import InvalidConfigurationError, InvalidSettingValueError
from mp_authz.voting.hierarchy import RoleHierarchy
from mp_authz.voting.policies import POLICIES
from mp_authz.voting.role import DEFAULT_ROLE_PREFIX


@dataclasses.dataclass
class AccessDecisionSettings(Settings):
    """Environment-driven configuration of the decision engine.

    ==================================  ===============================
    Variable                            Default
    ==================================  ===============================
    AUTHZ_POLICY                        ``unanimous``
    AUTHZ_ALLOW_IF_ALL_ABSTAIN          ``false``
    AUTHZ_ALLOW_IF_EQUAL_GRANTED_DENIED ``false`` (consensus only)
    AUTHZ_ROLE_PREFIX                   ``ROLE_``
    AUTHZ_ROLE_HIERARCHY                empty, e.g. ``ROLE_A > ROLE_B,ROLE_B > ROLE_C``
    ==================================  ===============================
    """

    _prefix: ClassVar[str] = "AUTHZ"

    policy: str = "unanimous"
    allow_if_all_abstain: bool = False
    allow_if_equal_granted_denied: bool = False
    role_prefix: str = DEFAULT_ROLE_PREFIX
    role_hierarchy: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        self.policy = self.policy.strip().lower()
        if self.policy not in POLICIES:
            raise InvalidSettingValueError(
                "policy", self.policy, f"expected one of {sorted(POLICIES)}"
            )
        if self.allow_if_equal_granted_denied and self.policy != "consensus":
            raise InvalidSettingValueError(
                "allow_if_equal_granted_denied",
                self.allow_if_equal_granted_denied,
                "only the consensus policy breaks ties",
            )
        try:
            RoleHierarchy.parse(self.role_hierarchy)
        except InvalidConfigurationError as exc:
            raise InvalidSettingValueError("role_hierarchy", self.role_hierarchy, exc.message) from exc

    def policy_flags(self) -> dict[str, bool]:
        flags = {"allow_if_all_abstain": self.allow_if_all_abstain}
        if self.policy == "consensus":
            flags["allow_if_equal_granted_denied"] = self.allow_if_equal_granted_denied
        return flags


__all__ = ["AccessDecisionSettings"]
