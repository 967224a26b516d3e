"""Voting – AccessDecisionManagerRef, an atomically swappable manager.

Reconfiguring a running service never mutates a live manager: build a new
one and :meth:`~AccessDecisionManagerRef.swap` it in.  Each decision reads
the reference exactly once, so it runs start to finish against a single
configuration snapshot.
"""
from __future__ import annotations

import threading
from typing import Any, Sequence

from mp_authz.kernel.security import ConfigAttribute, Principal
from mp_authz.observability.logging import get_logger
from mp_authz.voting.manager import AccessDecisionManager, Decision

logger = get_logger(__name__)


class AccessDecisionManagerRef:
    """Holds the current :class:`AccessDecisionManager` snapshot."""

    def __init__(self, manager: AccessDecisionManager) -> None:
        self._current = manager
        self._lock = threading.Lock()

    @property
    def current(self) -> AccessDecisionManager:
        return self._current

    def swap(self, manager: AccessDecisionManager) -> AccessDecisionManager:
        """Install *manager* and return the one it replaced."""
        with self._lock:
            previous, self._current = self._current, manager
        logger.info(
            "authz.manager_swapped",
            policy=manager.policy.name,
            voters=[v.name for v in manager.voters],
        )
        return previous

    def evaluate(
        self,
        principal: Principal,
        resource: Any,
        attributes: Sequence[ConfigAttribute],
    ) -> Decision:
        return self._current.evaluate(principal, resource, attributes)

    def decide(
        self,
        principal: Principal,
        resource: Any,
        attributes: Sequence[ConfigAttribute],
    ) -> None:
        self._current.decide(principal, resource, attributes)


__all__ = ["AccessDecisionManagerRef"]
