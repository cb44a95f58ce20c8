"""
Record Issue Models

A record issue describes one malformed or inconsistent input record that
the engine skipped or zero-defaulted. Issues are returned alongside the
derived figures and logged, so a dashboard stays usable with a bad row
while the problem is still visible.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class IssueType(str, Enum):
    """Kinds of recoverable input problems."""
    INVALID_AMOUNT = "invalid_amount"
    INVALID_DATE = "invalid_date"
    MISSING_CATEGORY = "missing_category"
    INVALID_RECORD = "invalid_record"


class IssueSeverity(str, Enum):
    """Severity level for record issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class RecordIssue(BaseModel):
    """
    A single input problem.

    `error` means the record was dropped, `warning` means it was kept
    (e.g. an unknown category still counts in rollups).
    """

    issue_type: IssueType
    severity: IssueSeverity = IssueSeverity.WARNING

    record_type: str = Field(
        ...,
        description="Type of record (e.g., 'transaction', 'budget', 'goal')"
    )
    record_id: Optional[str] = Field(
        default=None,
        description="Identifier of the offending record, when it has one"
    )
    field: Optional[str] = None

    message: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of the problem"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "issue_type": self.issue_type.value,
            "severity": self.severity.value,
            "record_type": self.record_type,
            "record_id": self.record_id,
            "field": self.field,
            "message": self.message,
            "details": self.details,
        }


PREVIEW_LENGTH = 80


def _preview(value: Any) -> str:
    """repr() of an offending value, shortened to fit in a message."""
    text = repr(value)
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH - 3] + "..."
    return text


class IssueBuilder:
    """
    Helper class to build record issues with common patterns.

    Usage:
        issue = IssueBuilder.invalid_amount("transaction", "t-1", "-5")
        issue = IssueBuilder.missing_category("budget", "b-1", "Pets")
    """

    @staticmethod
    def invalid_amount(
        record_type: str,
        record_id: Optional[str],
        value: Any,
        field: str = "amount",
    ) -> RecordIssue:
        return RecordIssue(
            issue_type=IssueType.INVALID_AMOUNT,
            severity=IssueSeverity.ERROR,
            record_type=record_type,
            record_id=record_id,
            field=field,
            message=f"Amount {_preview(value)} is not a non-negative decimal; record skipped",
            details={"value": str(value)},
        )

    @staticmethod
    def invalid_date(
        record_type: str,
        record_id: Optional[str],
        value: Any,
        field: str = "date",
    ) -> RecordIssue:
        return RecordIssue(
            issue_type=IssueType.INVALID_DATE,
            severity=IssueSeverity.ERROR,
            record_type=record_type,
            record_id=record_id,
            field=field,
            message=f"Date {_preview(value)} is not an ISO date; record skipped",
            details={"value": str(value)},
        )

    @staticmethod
    def missing_category(
        record_type: str,
        record_id: Optional[str],
        category: str,
    ) -> RecordIssue:
        return RecordIssue(
            issue_type=IssueType.MISSING_CATEGORY,
            severity=IssueSeverity.WARNING,
            record_type=record_type,
            record_id=record_id,
            field="category",
            message=f"Category {_preview(category)} is not in the category list",
            details={"category": category},
        )

    @staticmethod
    def invalid_record(
        record_type: str,
        record_id: Optional[str],
        errors: list[str],
    ) -> RecordIssue:
        return RecordIssue(
            issue_type=IssueType.INVALID_RECORD,
            severity=IssueSeverity.ERROR,
            record_type=record_type,
            record_id=record_id,
            message=f"Record failed validation: {'; '.join(errors)}"[:500],
            details={"errors": errors},
        )
