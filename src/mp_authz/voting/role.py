"""Voting – RoleVoter.

Votes on attributes that look like roles (by default anything starting
with ``ROLE_``).  The principal is granted if it holds an authority equal
to any of those attributes, verbatim and prefix included.
"""
from __future__ import annotations

from typing import Sequence

from mp_authz.kernel.security import Authority, ConfigAttribute, Vote
from mp_authz.voting.voter import Voter

DEFAULT_ROLE_PREFIX = "ROLE_"


class RoleVoter(Voter):
    """Grant when the principal holds any of the role attributes.

    * no attribute carries :attr:`role_prefix` → ``ABSTAIN``
    * at least one matching authority → ``GRANT``
    * otherwise → ``DENY``

    The prefix only decides which attributes are supported; matching is
    always an exact string comparison.  An empty prefix makes the voter
    judge every attribute.

    The prefix is fixed at construction.  Use :meth:`with_role_prefix` to
    derive a differently-configured voter before wiring it into a manager.
    """

    def __init__(self, role_prefix: str = DEFAULT_ROLE_PREFIX) -> None:
        self._role_prefix = role_prefix

    @property
    def role_prefix(self) -> str:
        return self._role_prefix

    def with_role_prefix(self, role_prefix: str) -> RoleVoter:
        return type(self)(role_prefix=role_prefix)

    def supports(self, attribute: ConfigAttribute) -> bool:
        return attribute.value.startswith(self._role_prefix)

    def vote(
        self,
        authorities: frozenset[Authority],
        attributes: Sequence[ConfigAttribute],
    ) -> Vote:
        supported = self.supported(attributes)
        if not supported:
            return Vote.ABSTAIN
        held = self.extract_authorities(authorities)
        if any(a.value in held for a in supported):
            return Vote.GRANT
        return Vote.DENY

    def extract_authorities(self, authorities: frozenset[Authority]) -> frozenset[str]:
        """Return the authority values the principal is considered to hold."""
        return frozenset(a.value for a in authorities)

    def __repr__(self) -> str:
        return f"{self.name}(role_prefix={self._role_prefix!r})"


__all__ = ["DEFAULT_ROLE_PREFIX", "RoleVoter"]
