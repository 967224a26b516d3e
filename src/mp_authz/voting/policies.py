"""Voting – aggregation policies.

An aggregation policy turns the full, ordered vote sequence of one decision
into a grant (``True``) or deny (``False``).  Policies only look at how many
votes of each kind were cast, so the order of voters never changes the
outcome.

=============  ==========================================================
Policy         Grants when
=============  ==========================================================
unanimous      no DENY and at least one GRANT
affirmative    at least one GRANT, however many DENY
consensus      more GRANT than DENY (ties: ``allow_if_equal_granted_denied``)
=============  ==========================================================

Every policy falls back to ``allow_if_all_abstain`` (default ``False``) when
nobody granted or denied.
"""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Iterable, Protocol, runtime_checkable

from mp_authz.kernel.errors import InvalidConfigurationError
from mp_authz.kernel.security import Vote


@dataclasses.dataclass(frozen=True)
class VoteTally:
    """Counts of each kind of vote in one decision."""

    grants: int = 0
    denials: int = 0
    abstentions: int = 0

    @classmethod
    def of(cls, votes: Iterable[Vote]) -> VoteTally:
        grants = denials = abstentions = 0
        for vote in votes:
            if vote is Vote.GRANT:
                grants += 1
            elif vote is Vote.DENY:
                denials += 1
            else:
                abstentions += 1
        return cls(grants=grants, denials=denials, abstentions=abstentions)

    @property
    def all_abstained(self) -> bool:
        return self.grants == 0 and self.denials == 0

    @property
    def total(self) -> int:
        return self.grants + self.denials + self.abstentions


@runtime_checkable
class AggregationPolicy(Protocol):
    """Port: combine a vote sequence into a grant/deny verdict."""

    name: ClassVar[str]
    allow_if_all_abstain: bool

    def combine(self, votes: Iterable[Vote]) -> bool: ...


@dataclasses.dataclass(frozen=True)
class UnanimousPolicy:
    """Grant only if nobody denied; a single DENY vetoes any number of GRANTs."""

    name: ClassVar[str] = "unanimous"
    allow_if_all_abstain: bool = False

    def combine(self, votes: Iterable[Vote]) -> bool:
        tally = VoteTally.of(votes)
        if tally.denials:
            return False
        if tally.grants:
            return True
        return self.allow_if_all_abstain


@dataclasses.dataclass(frozen=True)
class AffirmativePolicy:
    """Grant as soon as one voter granted, regardless of denials."""

    name: ClassVar[str] = "affirmative"
    allow_if_all_abstain: bool = False

    def combine(self, votes: Iterable[Vote]) -> bool:
        tally = VoteTally.of(votes)
        if tally.grants:
            return True
        if tally.denials:
            return False
        return self.allow_if_all_abstain


@dataclasses.dataclass(frozen=True)
class ConsensusPolicy:
    """Majority rule over non-abstaining votes.

    A non-zero tie is resolved by ``allow_if_equal_granted_denied``, which
    defaults to deny.
    """

    name: ClassVar[str] = "consensus"
    allow_if_all_abstain: bool = False
    allow_if_equal_granted_denied: bool = False

    def combine(self, votes: Iterable[Vote]) -> bool:
        tally = VoteTally.of(votes)
        if tally.all_abstained:
            return self.allow_if_all_abstain
        if tally.grants == tally.denials:
            return self.allow_if_equal_granted_denied
        return tally.grants > tally.denials


POLICIES: dict[str, type[Any]] = {
    UnanimousPolicy.name: UnanimousPolicy,
    AffirmativePolicy.name: AffirmativePolicy,
    ConsensusPolicy.name: ConsensusPolicy,
}


def policy_for(name: str, **flags: bool) -> AggregationPolicy:
    """Build the policy registered under *name* with the given flags.

    Raises :class:`InvalidConfigurationError` for an unknown policy name or
    a flag the policy does not accept::

        policy_for("consensus", allow_if_equal_granted_denied=True)
    """
    policy_cls = POLICIES.get(name.strip().lower())
    if policy_cls is None:
        raise InvalidConfigurationError(
            f"Unknown aggregation policy {name!r}",
            detail={"policy": name, "known": sorted(POLICIES)},
        )
    accepted = {f.name for f in dataclasses.fields(policy_cls)}
    unknown = sorted(set(flags) - accepted)
    if unknown:
        raise InvalidConfigurationError(
            f"Policy {policy_cls.name!r} does not accept {', '.join(unknown)}",
            detail={"policy": policy_cls.name, "flags": unknown},
        )
    return policy_cls(**flags)


__all__ = [
    "AffirmativePolicy",
    "AggregationPolicy",
    "ConsensusPolicy",
    "POLICIES",
    "UnanimousPolicy",
    "VoteTally",
    "policy_for",
]
