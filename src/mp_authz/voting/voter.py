"""Voting – Voter port.

A voter judges one principal's authorities against the attributes required
by one protected invocation and answers GRANT, DENY or ABSTAIN.  Voters
must be pure: the same inputs always yield the same vote, and nothing is
remembered between calls, so one instance can serve any number of
concurrent decisions.
"""
from __future__ import annotations

import abc
from typing import Sequence

from mp_authz.kernel.security import Authority, ConfigAttribute, Vote


class Voter(abc.ABC):
    """Port: cast a vote on a set of required attributes.

    Implementations decide which attributes they are competent to judge via
    :meth:`supports`.  A voter that supports none of the attributes it is
    given must return :attr:`Vote.ABSTAIN`.

    Example::

        class BusinessHoursVoter(Voter):
            def supports(self, attribute: ConfigAttribute) -> bool:
                return attribute.value == "BUSINESS_HOURS"

            def vote(self, authorities, attributes) -> Vote:
                if not self.supported(attributes):
                    return Vote.ABSTAIN
                return Vote.GRANT if 9 <= datetime.now().hour < 17 else Vote.DENY
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abc.abstractmethod
    def supports(self, attribute: ConfigAttribute) -> bool:
        """Return ``True`` if this voter can judge *attribute*."""

    @abc.abstractmethod
    def vote(
        self,
        authorities: frozenset[Authority],
        attributes: Sequence[ConfigAttribute],
    ) -> Vote: ...

    def supported(self, attributes: Sequence[ConfigAttribute]) -> tuple[ConfigAttribute, ...]:
        """Return the attributes this voter supports, in their original order."""
        return tuple(a for a in attributes if self.supports(a))

    def __repr__(self) -> str:
        return f"{self.name}()"


__all__ = ["Voter"]
