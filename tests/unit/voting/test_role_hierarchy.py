"""Unit tests for RoleHierarchy and RoleHierarchyVoter."""

from __future__ import annotations

import pytest

from mp_authz.kernel.errors import InvalidConfigurationError
from mp_authz.kernel.security import Vote, attributes_of, authorities_of
from mp_authz.voting import RoleHierarchy, RoleHierarchyVoter, RoleVoter

LINES = [
    "ROLE_ADMIN > ROLE_STAFF",
    "ROLE_STAFF > ROLE_USER > ROLE_GUEST",
]


class TestRoleHierarchyParse:
    def test_chain_is_transitive(self) -> None:
        hierarchy = RoleHierarchy.parse(LINES)
        assert hierarchy.implied_by("ROLE_ADMIN") == frozenset(
            {"ROLE_STAFF", "ROLE_USER", "ROLE_GUEST"}
        )
        assert hierarchy.implied_by("ROLE_USER") == frozenset({"ROLE_GUEST"})

    def test_leaf_implies_nothing(self) -> None:
        assert RoleHierarchy.parse(LINES).implied_by("ROLE_GUEST") == frozenset()

    def test_unknown_role_implies_nothing(self) -> None:
        assert RoleHierarchy.parse(LINES).implied_by("ROLE_NOBODY") == frozenset()

    def test_blank_lines_ignored(self) -> None:
        hierarchy = RoleHierarchy.parse(["", "ROLE_A > ROLE_B", "   "])
        assert hierarchy.implied_by("ROLE_A") == frozenset({"ROLE_B"})

    def test_empty_hierarchy(self) -> None:
        assert RoleHierarchy.parse([]).implied_by("ROLE_A") == frozenset()
        assert RoleHierarchy().implied_by("ROLE_A") == frozenset()

    @pytest.mark.parametrize("line", ["ROLE_A", "ROLE_A >", "> ROLE_B", "ROLE_A >> ROLE_B"])
    def test_malformed_line_rejected(self, line: str) -> None:
        with pytest.raises(InvalidConfigurationError):
            RoleHierarchy.parse([line])

    def test_cycle_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="Cycle"):
            RoleHierarchy.parse(["ROLE_A > ROLE_B", "ROLE_B > ROLE_C > ROLE_A"])

    def test_self_reference_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            RoleHierarchy.parse(["ROLE_A > ROLE_A"])

    def test_reachable_includes_input(self) -> None:
        hierarchy = RoleHierarchy.parse(LINES)
        reachable = hierarchy.reachable(authorities_of("ROLE_STAFF", "OTHER"))
        assert {a.value for a in reachable} == {"ROLE_STAFF", "ROLE_USER", "ROLE_GUEST", "OTHER"}


class TestRoleHierarchyVoter:
    def _voter(self) -> RoleHierarchyVoter:
        return RoleHierarchyVoter(RoleHierarchy.parse(LINES))

    def test_is_role_voter(self) -> None:
        assert isinstance(self._voter(), RoleVoter)

    def test_implied_role_grants(self) -> None:
        voter = self._voter()
        assert voter.vote(authorities_of("ROLE_ADMIN"), attributes_of("ROLE_GUEST")) is Vote.GRANT

    def test_lower_role_does_not_imply_higher(self) -> None:
        voter = self._voter()
        assert voter.vote(authorities_of("ROLE_GUEST"), attributes_of("ROLE_ADMIN")) is Vote.DENY

    def test_plain_role_voter_does_not_expand(self) -> None:
        assert RoleVoter().vote(authorities_of("ROLE_ADMIN"), attributes_of("ROLE_GUEST")) is Vote.DENY

    def test_abstains_on_unsupported(self) -> None:
        voter = self._voter()
        assert voter.vote(authorities_of("ROLE_ADMIN"), attributes_of("IGNORED_BY_ALL")) is Vote.ABSTAIN

    def test_with_role_prefix_keeps_hierarchy(self) -> None:
        hierarchy = RoleHierarchy.parse(["PERM_ALL > PERM_READ"])
        voter = RoleHierarchyVoter(hierarchy).with_role_prefix("PERM_")
        assert isinstance(voter, RoleHierarchyVoter)
        assert voter.hierarchy is hierarchy
        assert voter.vote(authorities_of("PERM_ALL"), attributes_of("PERM_READ")) is Vote.GRANT
