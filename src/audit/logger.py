"""
Issue Logger

DESIGN DECISION: Every record the engine skips or zero-defaults is logged.
This provides:
1. Visibility of bad rows without breaking the dashboard
2. Debugging capability when totals look wrong

The logger is synchronous and side-effect free apart from emitting log
lines; the engine has no other I/O.
"""

import logging
import sys
from typing import Iterable, Optional

import structlog

from src.config import get_settings
from src.models.issues import IssueBuilder, IssueSeverity, RecordIssue


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog on top of stdlib logging."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_engine_settings = get_settings().engine
configure_logging(_engine_settings.log_level, _engine_settings.log_json)


def get_logger(name: Optional[str] = None):
    """Return a structlog logger bound to `name`."""
    return structlog.get_logger(name)


class IssueLogger:
    """
    Logs record issues at the level matching their severity and keeps
    them so callers can return them with their results.
    """
    
    def __init__(self, name: str = "ledger.issues"):
        self._logger = structlog.get_logger(name)
        self._issues: list[RecordIssue] = []
    
    @property
    def issues(self) -> list[RecordIssue]:
        return list(self._issues)
    
    def log(self, issue: RecordIssue) -> RecordIssue:
        """Log an issue and remember it."""
        log_dict = issue.to_log_dict()
        
        if issue.severity == IssueSeverity.ERROR:
            self._logger.error("record_issue", **log_dict)
        elif issue.severity == IssueSeverity.WARNING:
            self._logger.warning("record_issue", **log_dict)
        else:
            self._logger.info("record_issue", **log_dict)
        
        self._issues.append(issue)
        return issue
    
    def extend(self, issues: Iterable[RecordIssue]) -> None:
        for issue in issues:
            self.log(issue)
    
    def log_invalid_amount(
        self,
        record_type: str,
        record_id: Optional[str],
        value: object,
        field: str = "amount",
    ) -> RecordIssue:
        return self.log(IssueBuilder.invalid_amount(record_type, record_id, value, field))
    
    def log_invalid_date(
        self,
        record_type: str,
        record_id: Optional[str],
        value: object,
        field: str = "date",
    ) -> RecordIssue:
        return self.log(IssueBuilder.invalid_date(record_type, record_id, value, field))
    
    def log_missing_category(
        self,
        record_type: str,
        record_id: Optional[str],
        category: str,
    ) -> RecordIssue:
        return self.log(IssueBuilder.missing_category(record_type, record_id, category))
    
    def log_invalid_record(
        self,
        record_type: str,
        record_id: Optional[str],
        errors: list[str],
    ) -> RecordIssue:
        return self.log(IssueBuilder.invalid_record(record_type, record_id, errors))
