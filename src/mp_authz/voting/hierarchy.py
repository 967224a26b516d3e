"""Voting – RoleHierarchy and RoleHierarchyVoter.

A role hierarchy declares that holding one authority implies holding
others::

    hierarchy = RoleHierarchy.parse([
        "ROLE_ADMIN > ROLE_STAFF",
        "ROLE_STAFF > ROLE_USER > ROLE_GUEST",
    ])
    hierarchy.reachable(authorities_of("ROLE_ADMIN"))
    # {ROLE_ADMIN, ROLE_STAFF, ROLE_USER, ROLE_GUEST}
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from mp_authz.kernel.errors import InvalidConfigurationError
from mp_authz.kernel.security import Authority
from mp_authz.voting.role import DEFAULT_ROLE_PREFIX, RoleVoter


class RoleHierarchy:
    """Immutable, pre-computed "implies" relation between authorities."""

    def __init__(self, edges: Mapping[str, Iterable[str]] | None = None) -> None:
        direct: dict[str, frozenset[str]] = {
            higher: frozenset(lower) for higher, lower in (edges or {}).items()
        }
        self._closure: Mapping[str, frozenset[str]] = MappingProxyType(
            {role: self._expand(role, direct) for role in direct}
        )

    @classmethod
    def parse(cls, lines: Iterable[str]) -> RoleHierarchy:
        """Build a hierarchy from ``"HIGHER > LOWER [> LOWER ...]"`` lines.

        Blank lines are ignored.  Raises :class:`InvalidConfigurationError`
        for malformed lines or cycles.
        """
        edges: dict[str, set[str]] = {}
        for line in lines:
            if not line.strip():
                continue
            roles = [part.strip() for part in line.split(">")]
            if len(roles) < 2 or not all(roles):
                raise InvalidConfigurationError(
                    f"Malformed role hierarchy line: {line!r}",
                    detail={"line": line},
                )
            for higher, lower in zip(roles, roles[1:]):
                edges.setdefault(higher, set()).add(lower)
        return cls(edges)

    @staticmethod
    def _expand(role: str, direct: Mapping[str, frozenset[str]]) -> frozenset[str]:
        seen: set[str] = set()
        stack = list(direct.get(role, ()))
        while stack:
            current = stack.pop()
            if current == role:
                raise InvalidConfigurationError(
                    f"Cycle in role hierarchy involving {role!r}",
                    detail={"role": role},
                )
            if current in seen:
                continue
            seen.add(current)
            stack.extend(direct.get(current, ()))
        return frozenset(seen)

    def implied_by(self, role: str) -> frozenset[str]:
        """Return every role transitively implied by *role* (excluding itself)."""
        return self._closure.get(role, frozenset())

    def reachable(self, authorities: Iterable[Authority]) -> frozenset[Authority]:
        """Return *authorities* plus everything they imply."""
        result = set(authorities)
        for authority in list(result):
            result.update(Authority(r) for r in self.implied_by(authority.value))
        return frozenset(result)


class RoleHierarchyVoter(RoleVoter):
    """A :class:`RoleVoter` that expands authorities through a hierarchy first."""

    def __init__(
        self,
        hierarchy: RoleHierarchy,
        role_prefix: str = DEFAULT_ROLE_PREFIX,
    ) -> None:
        super().__init__(role_prefix=role_prefix)
        self._hierarchy = hierarchy

    @property
    def hierarchy(self) -> RoleHierarchy:
        return self._hierarchy

    def with_role_prefix(self, role_prefix: str) -> RoleHierarchyVoter:
        return type(self)(self._hierarchy, role_prefix=role_prefix)

    def extract_authorities(self, authorities: frozenset[Authority]) -> frozenset[str]:
        return frozenset(a.value for a in self._hierarchy.reachable(authorities))


__all__ = ["RoleHierarchy", "RoleHierarchyVoter"]
