"""
Two-Stage Record Validation

DESIGN DECISION: Records arrive from storage already validated, but the
engine still checks them before aggregating, in two stages:

STAGE 1 - SCHEMA VALIDATION:
- Builds pydantic models from raw mappings
- Malformed amounts and dates drop the row with an error issue

STAGE 2 - SEMANTIC VALIDATION:
- Reconciles category names against the official category list
- Unknown categories are kept (rollups key by the raw string) and
  reported as warnings

IMPORTANT: Validation never raises for a bad row. One malformed record
must not take the whole dashboard down.
"""

from typing import Any, Iterable, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from src.audit import IssueLogger
from src.models.issues import RecordIssue
from src.models.ledger import (
    Budget,
    Category,
    Goal,
    Transaction,
    TransactionType,
)


ModelT = TypeVar("ModelT", bound=BaseModel)

Row = Union[Mapping[str, Any], BaseModel]

_AMOUNT_FIELDS = {"amount", "spent", "target_amount", "current_amount"}
_DATE_FIELDS = {"date", "deadline", "month"}

# camelCase keys as they come out of the JSON API
_FIELD_ALIASES = {
    "targetAmount": "target_amount",
    "currentAmount": "current_amount",
}


def _normalize(row: Mapping[str, Any]) -> dict[str, Any]:
    return {_FIELD_ALIASES.get(key, key): value for key, value in row.items()}


class RecordValidator:
    """
    Turns raw record collections into engine models.

    Stage 1: Schema validation (per record, drops bad rows)
    Stage 2: Semantic validation (category reconciliation, keeps rows)
    """

    def __init__(self, issue_logger: Optional[IssueLogger] = None):
        self._issues = issue_logger or IssueLogger()

    @property
    def issues(self) -> list[RecordIssue]:
        return self._issues.issues

    def _coerce(
        self,
        model: type[ModelT],
        rows: Iterable[Row],
        record_type: str,
    ) -> list[ModelT]:
        """Stage 1: build models, skipping rows that fail validation."""
        records: list[ModelT] = []

        for row in rows:
            if isinstance(row, model):
                records.append(row)
                continue

            if isinstance(row, BaseModel):
                row = row.model_dump()
            elif not isinstance(row, Mapping):
                self._issues.log_invalid_record(
                    record_type,
                    None,
                    [f"expected a mapping, got {type(row).__name__}"],
                )
                continue

            data = _normalize(row)
            try:
                records.append(model.model_validate(data))
            except ValidationError as e:
                self._report(record_type, data, e)

        return records

    def _report(
        self,
        record_type: str,
        data: Mapping[str, Any],
        error: ValidationError,
    ) -> None:
        """Classify a validation failure into a single issue."""
        record_id = data.get("id")
        record_id = str(record_id) if record_id is not None else None

        failed_fields = [str(err["loc"][0]) for err in error.errors() if err["loc"]]

        for field in failed_fields:
            if field in _AMOUNT_FIELDS:
                self._issues.log_invalid_amount(record_type, record_id, data.get(field), field)
                return
        for field in failed_fields:
            if field in _DATE_FIELDS:
                self._issues.log_invalid_date(record_type, record_id, data.get(field), field)
                return

        messages = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in error.errors()
        ]
        self._issues.log_invalid_record(record_type, record_id, messages)

    def transactions(self, rows: Iterable[Row]) -> list[Transaction]:
        return self._coerce(Transaction, rows, "transaction")

    def categories(self, rows: Iterable[Row]) -> list[Category]:
        return self._coerce(Category, rows, "category")

    def budgets(self, rows: Iterable[Row]) -> list[Budget]:
        return self._coerce(Budget, rows, "budget")

    def goals(self, rows: Iterable[Row]) -> list[Goal]:
        return self._coerce(Goal, rows, "goal")

    def reconcile_categories(
        self,
        transactions: Iterable[Transaction],
        categories: Iterable[Category],
    ) -> list[RecordIssue]:
        """
        Stage 2: flag transactions whose category is not in the list.

        A transaction is matched against categories of its own type, so an
        expense filed under an income category is flagged too.
        """
        known: dict[TransactionType, set[str]] = {
            TransactionType.INCOME: set(),
            TransactionType.EXPENSE: set(),
        }
        for category in categories:
            known[category.type].add(category.name)

        issues = []
        for txn in transactions:
            if txn.category not in known[txn.type]:
                issues.append(
                    self._issues.log_missing_category("transaction", txn.id, txn.category)
                )
        return issues
