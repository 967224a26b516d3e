"""Voting – AccessDecisionManager.

Polls every configured :class:`~mp_authz.voting.voter.Voter` in order and
hands the complete vote sequence to one
:class:`~mp_authz.voting.policies.AggregationPolicy`::

    manager = AccessDecisionManager(
        [RoleVoter(), BusinessHoursVoter()],
        UnanimousPolicy(allow_if_all_abstain=False),
    )
    manager.decide(principal, "orders:cancel", attributes_of("ROLE_SUPPORT"))

``decide`` returns ``None`` when access is granted and raises
:class:`~mp_authz.kernel.errors.AccessDeniedError` otherwise.  A manager is
immutable once built and may be shared by any number of threads.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Sequence

from mp_authz.kernel.errors import (
    AccessDeniedError,
    InvalidConfigurationError,
    UnsupportedAttributeError,
)
from mp_authz.kernel.security import Authority, ConfigAttribute, Principal, Vote
from mp_authz.observability.logging import AuditLogger, get_logger
from mp_authz.voting.policies import AggregationPolicy, UnanimousPolicy, VoteTally
from mp_authz.voting.voter import Voter

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Decision:
    """Full record of one access decision."""

    granted: bool
    subject: str
    resource: Any
    attributes: tuple[ConfigAttribute, ...]
    votes: tuple[Vote, ...]
    policy: str

    @property
    def tally(self) -> VoteTally:
        return VoteTally.of(self.votes)

    def __bool__(self) -> bool:
        return self.granted


class AccessDecisionManager:
    """Combine the votes of an ordered voter list with one aggregation policy.

    Parameters
    ----------
    voters:
        Voters polled in this order on every decision.  Duplicates are
        allowed.  Must not be empty.
    policy:
        Strategy combining the votes.  Defaults to :class:`UnanimousPolicy`
        with ``allow_if_all_abstain=False``.
    audit:
        Optional :class:`AuditLogger` receiving every decision.
    """

    def __init__(
        self,
        voters: Iterable[Voter],
        policy: AggregationPolicy | None = None,
        *,
        audit: AuditLogger | None = None,
    ) -> None:
        self._voters: tuple[Voter, ...] = tuple(voters)
        if not self._voters:
            raise InvalidConfigurationError("A list of voters is required")
        for voter in self._voters:
            if not isinstance(voter, Voter):
                raise InvalidConfigurationError(
                    f"{voter!r} is not a Voter",
                    detail={"voter": repr(voter)},
                )
        self._policy = policy if policy is not None else UnanimousPolicy()
        if not isinstance(self._policy, AggregationPolicy):
            raise InvalidConfigurationError(
                f"{self._policy!r} is not an aggregation policy",
                detail={"policy": repr(self._policy)},
            )
        self._audit = audit

    @property
    def voters(self) -> tuple[Voter, ...]:
        return self._voters

    @property
    def policy(self) -> AggregationPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Attribute support
    # ------------------------------------------------------------------

    def supports(self, attribute: ConfigAttribute) -> bool:
        """Return ``True`` if at least one voter can judge *attribute*."""
        return any(v.supports(attribute) for v in self._voters)

    def validate_attributes(self, attributes: Iterable[ConfigAttribute]) -> None:
        """Raise :class:`UnsupportedAttributeError` for attributes no voter supports.

        Intended for start-up checks of a resource-to-attribute registry.
        """
        unsupported = [a.value for a in attributes if not self.supports(a)]
        if unsupported:
            raise UnsupportedAttributeError(unsupported)

    # ------------------------------------------------------------------
    # Deciding
    # ------------------------------------------------------------------

    def poll(
        self,
        authorities: frozenset[Authority],
        attributes: Sequence[ConfigAttribute],
    ) -> tuple[Vote, ...]:
        """Ask every voter, in order, without short-circuiting."""
        return tuple(v.vote(authorities, attributes) for v in self._voters)

    def evaluate(
        self,
        principal: Principal,
        resource: Any,
        attributes: Sequence[ConfigAttribute],
    ) -> Decision:
        """Decide without raising; return the full :class:`Decision`."""
        attributes = tuple(attributes)
        if not any(self.supports(a) for a in attributes):
            logger.warning(
                "authz.no_applicable_voter",
                resource=str(resource),
                attributes=[a.value for a in attributes],
                voters=[v.name for v in self._voters],
                allow_if_all_abstain=self._policy.allow_if_all_abstain,
            )
        votes = self.poll(principal.authorities, attributes)
        decision = Decision(
            granted=self._policy.combine(votes),
            subject=principal.subject,
            resource=resource,
            attributes=attributes,
            votes=votes,
            policy=self._policy.name,
        )
        logger.debug(
            "authz.decision",
            subject=decision.subject,
            resource=str(resource),
            policy=decision.policy,
            granted=decision.granted,
            votes=[v.value for v in votes],
        )
        if self._audit is not None:
            self._audit.log_decision(decision)
        return decision

    def decide(
        self,
        principal: Principal,
        resource: Any,
        attributes: Sequence[ConfigAttribute],
    ) -> None:
        """Return normally when access is granted.

        Raises
        ------
        AccessDeniedError
            When the aggregation policy denies access.
        """
        decision = self.evaluate(principal, resource, attributes)
        if decision.granted:
            return
        tally = decision.tally
        logger.info(
            "authz.access_denied",
            subject=decision.subject,
            resource=str(resource),
            policy=decision.policy,
            grants=tally.grants,
            denials=tally.denials,
            abstentions=tally.abstentions,
        )
        raise AccessDeniedError(
            resource,
            subject=decision.subject,
            tally=tally,
            policy=decision.policy,
        )

    def __repr__(self) -> str:
        return f"AccessDecisionManager(voters={list(self._voters)!r}, policy={self._policy!r})"


__all__ = ["AccessDecisionManager", "Decision"]
