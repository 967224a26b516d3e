"""Testing helpers – fake voters and Hypothesis strategies."""
from mp_authz.testing.fakes import DenyAgainVoter, DenyVoter, StaticVoter

__all__ = ["DenyAgainVoter", "DenyVoter", "StaticVoter"]
