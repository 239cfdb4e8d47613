"""Audit logging subsystem for lcsort.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: Unique identifier for one CLI run
"""

from lcsort.audit.helpers import generate_run_id
from lcsort.audit.logger import AuditLogger
from lcsort.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
