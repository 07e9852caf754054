"""Audit logging for driver runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope
- generate_run_id: unique run identifiers
"""

from sitepercolation.audit.helpers import generate_run_id
from sitepercolation.audit.logger import AuditLogger
from sitepercolation.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
