"""Observability – structured logging and the access audit sink."""
from mp_authz.observability.logging import AuditLogger, AuditOutcome, JsonLoggerFactory, get_logger

__all__ = ["AuditLogger", "AuditOutcome", "JsonLoggerFactory", "get_logger"]
