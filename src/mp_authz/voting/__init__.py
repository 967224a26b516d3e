"""Voting – voters, aggregation policies and the access decision manager."""
from mp_authz.voting.hierarchy import RoleHierarchy, RoleHierarchyVoter
from mp_authz.voting.holder import AccessDecisionManagerRef
from mp_authz.voting.manager import AccessDecisionManager, Decision
from mp_authz.voting.policies import (
    AffirmativePolicy,
    AggregationPolicy,
    ConsensusPolicy,
    UnanimousPolicy,
    VoteTally,
    policy_for,
)
from mp_authz.voting.role import DEFAULT_ROLE_PREFIX, RoleVoter
from mp_authz.voting.voter import Voter

__all__ = [
    "AccessDecisionManager",
    "AccessDecisionManagerRef",
    "AffirmativePolicy",
    "AggregationPolicy",
    "ConsensusPolicy",
    "DEFAULT_ROLE_PREFIX",
    "Decision",
    "RoleHierarchy",
    "RoleHierarchyVoter",
    "RoleVoter",
    "UnanimousPolicy",
    "Voter",
    "VoteTally",
    "policy_for",
]
