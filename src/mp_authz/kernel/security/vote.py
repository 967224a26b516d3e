"""Kernel security – Vote."""
from __future__ import annotations

from enum import Enum


class Vote(str, Enum):
    """A single voter's opinion on one (principal, attributes) pair.

    ``ABSTAIN`` is only ever an intermediate value; a decision always ends
    in grant or deny.
    """
    GRANT = "GRANT"
    DENY = "DENY"
    ABSTAIN = "ABSTAIN"


__all__ = ["Vote"]
