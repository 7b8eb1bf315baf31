"""Audit logging subsystem for pointlink.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope written per line
"""

from pointlink.audit.helpers import environment_info, generate_run_id
from pointlink.audit.logger import AuditLogger
from pointlink.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "environment_info",
    "generate_run_id",
]
