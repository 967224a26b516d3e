"""Config – build an AccessDecisionManager from settings."""
from __future__ import annotations

from typing import Iterable

from mp_authz.config.settings.access import AccessDecisionSettings
from mp_authz.observability.logging import AuditLogger, get_logger
from mp_authz.voting.hierarchy import RoleHierarchy, RoleHierarchyVoter
from mp_authz.voting.manager import AccessDecisionManager
from mp_authz.voting.policies import policy_for
from mp_authz.voting.role import RoleVoter
from mp_authz.voting.voter import Voter

logger = get_logger(__name__)


def build_decision_manager(
    settings: AccessDecisionSettings,
    extra_voters: Iterable[Voter] = (),
    *,
    audit: AuditLogger | None = None,
) -> AccessDecisionManager:
    """Wire the role voter, *extra_voters* and the configured policy.

    The role voter is polled first.  It is a :class:`RoleHierarchyVoter`
    when ``settings.role_hierarchy`` is non-empty, a plain
    :class:`RoleVoter` otherwise.
    """
    role_voter: RoleVoter
    if settings.role_hierarchy:
        role_voter = RoleHierarchyVoter(
            RoleHierarchy.parse(settings.role_hierarchy),
            role_prefix=settings.role_prefix,
        )
    else:
        role_voter = RoleVoter(role_prefix=settings.role_prefix)

    manager = AccessDecisionManager(
        [role_voter, *extra_voters],
        policy_for(settings.policy, **settings.policy_flags()),
        audit=audit,
    )
    logger.info(
        "authz.manager_built",
        policy=manager.policy.name,
        voters=[v.name for v in manager.voters],
        allow_if_all_abstain=settings.allow_if_all_abstain,
    )
    return manager


__all__ = ["build_decision_manager"]
