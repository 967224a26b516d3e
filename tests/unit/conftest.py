"""Shared fixtures for the unit suite."""

from __future__ import annotations

import pytest
import structlog

from mp_authz.kernel.security import Principal
from mp_authz.testing import DenyAgainVoter, DenyVoter
from mp_authz.voting import AccessDecisionManager, RoleVoter, UnanimousPolicy


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def somebody() -> Principal:
    """Principal holding ``ROLE_1`` and ``ROLE_2``."""
    return Principal.of("somebody", "ROLE_1", "ROLE_2")


@pytest.fixture
def unanimous_manager() -> AccessDecisionManager:
    """RoleVoter followed by two deny-only voters, unanimous policy."""
    return AccessDecisionManager(
        [RoleVoter(), DenyVoter(), DenyAgainVoter()],
        UnanimousPolicy(),
    )
