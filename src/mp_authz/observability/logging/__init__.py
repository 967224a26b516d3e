"""Observability – structured logging helpers."""
from mp_authz.observability.logging.audit import AuditLogger, AuditOutcome
from mp_authz.observability.logging.factory import JsonLoggerFactory
from mp_authz.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mp_authz.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
