"""Unit tests for testing fakes."""

from __future__ import annotations

from mp_authz.kernel.security import Vote, attributes_of, authorities_of
from mp_authz.testing import DenyAgainVoter, DenyVoter, StaticVoter
from mp_authz.voting import Voter

NOBODY = authorities_of()


class TestStaticVoter:
    def test_supports_everything_by_default(self) -> None:
        voter = StaticVoter(Vote.GRANT)
        assert voter.vote(NOBODY, attributes_of("ANYTHING")) is Vote.GRANT

    def test_abstains_outside_supported(self) -> None:
        voter = StaticVoter(Vote.DENY, supported={"X"})
        assert voter.vote(NOBODY, attributes_of("Y")) is Vote.ABSTAIN
        assert voter.vote(NOBODY, attributes_of("Y", "X")) is Vote.DENY

    def test_abstains_on_empty_attributes(self) -> None:
        assert StaticVoter(Vote.GRANT).vote(NOBODY, ()) is Vote.ABSTAIN

    def test_counts_calls(self) -> None:
        voter = StaticVoter(Vote.GRANT)
        voter.vote(NOBODY, attributes_of("A"))
        voter.vote(NOBODY, attributes_of("B"))
        assert voter.calls == 2

    def test_is_voter(self) -> None:
        assert isinstance(StaticVoter(Vote.ABSTAIN), Voter)


class TestDenyVoters:
    def test_deny_voter(self) -> None:
        voter = DenyVoter()
        assert voter.vote(NOBODY, attributes_of("DENY_FOR_SURE")) is Vote.DENY
        assert voter.vote(NOBODY, attributes_of("DENY_AGAIN_FOR_SURE")) is Vote.ABSTAIN
        assert voter.vote(NOBODY, attributes_of("ROLE_2")) is Vote.ABSTAIN

    def test_deny_again_voter(self) -> None:
        voter = DenyAgainVoter()
        assert voter.vote(NOBODY, attributes_of("DENY_AGAIN_FOR_SURE")) is Vote.DENY
        assert voter.vote(NOBODY, attributes_of("DENY_FOR_SURE")) is Vote.ABSTAIN

    def test_names(self) -> None:
        assert DenyVoter().name == "DenyVoter"
        assert DenyAgainVoter().name == "DenyAgainVoter"
