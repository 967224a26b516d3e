"""Observability – AuditLogger.

A dedicated structured-log sink for access decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from mp_authz.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from mp_authz.voting.manager import Decision


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    DENIED = "denied"


class AuditLogger:
    """Structured-log sink for security-sensitive access decisions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger.  Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "unknown", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_access(
        self,
        subject: str,
        resource: str,
        outcome: AuditOutcome | str,
        **extra: Any,
    ) -> None:
        """Record one access event for *subject* on *resource*."""
        self._log.warning(
            "audit.access",
            service=self._service,
            principal_id=subject,
            resource=resource,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        )

    def log_decision(self, decision: Decision) -> None:
        """Record the outcome of an :class:`~mp_authz.voting.manager.Decision`."""
        self.log_access(
            decision.subject,
            str(decision.resource),
            AuditOutcome.SUCCESS if decision.granted else AuditOutcome.DENIED,
            policy=decision.policy,
            attributes=[a.value for a in decision.attributes],
            grants=decision.tally.grants,
            denials=decision.tally.denials,
            abstentions=decision.tally.abstentions,
        )


__all__ = ["AuditLogger", "AuditOutcome"]
