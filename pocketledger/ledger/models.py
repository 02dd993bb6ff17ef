"""Mini README: Ledger entities and query result records.

Structure:
    * TransactionType - income versus expense entries.
    * Category - the fixed list of category labels offered to callers.
    * Transaction - immutable ledger entry.
    * Budget - per-category limit with a running spend counter.
    * CategorySpending / TrendPoint / LedgerSummary / BudgetAlert - query results.
    * parse_iso_date / calendar_date - ISO-8601 parsing raising ``MalformedDateError``.

Every record exposes ``as_dict`` returning the camelCase wire shape used by
the tool layer and the web interface.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import InvalidEnumValueError, MalformedDateError


class TransactionType(str, Enum):
    """Enumerate the supported transaction types."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise InvalidEnumValueError(
                "transaction type", value, [member.value for member in cls]
            ) from error


class Category(str, Enum):
    """Category labels accepted at the tool boundary."""

    FOOD_AND_DINING = "Food & Dining"
    SHOPPING = "Shopping"
    TRANSPORTATION = "Transportation"
    BILLS_AND_UTILITIES = "Bills & Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTHCARE = "Healthcare"
    TRAVEL = "Travel"
    EDUCATION = "Education"
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENT = "Investment"
    OTHER = "Other"

    @classmethod
    def labels(cls) -> Tuple[str, ...]:
        """Return every category label in declaration order."""

        return tuple(member.value for member in cls)


_EXTENDED_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]|$)")


def _check_extended_form(value: object) -> None:
    """Require the zero-padded ``YYYY-MM-DD`` prefix used for string ordering."""

    if not isinstance(value, str) or not _EXTENDED_DATE.match(value):
        raise MalformedDateError(value)


def category_label(category: object) -> str:
    """Return the plain string label for enum members or raw strings."""

    if isinstance(category, Enum):
        return str(category.value)
    return str(category)


def parse_iso_date(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time into a naive ``datetime``.

    Only the extended form (``2024-01-15`` or ``2024-01-15T09:30``) is
    accepted; basic and week forms would break lexical ordering.
    Offsets are converted to UTC before the tzinfo is dropped so aware and
    naive values can be ordered together.
    """

    _check_extended_form(value)
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as error:
        raise MalformedDateError(value) from error
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def calendar_date(value: str) -> date:
    """Return the calendar day written in ``value``, ignoring any offset."""

    _check_extended_form(value)
    try:
        return datetime.fromisoformat(value).date()
    except (TypeError, ValueError) as error:
        raise MalformedDateError(value) from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent an immutable ledger entry."""

    transaction_id: str
    transaction_type: TransactionType
    amount: float
    category: str
    description: str
    date: str
    tags: Optional[Tuple[str, ...]] = None

    @property
    def is_expense(self) -> bool:
        """True for expense entries."""

        return self.transaction_type is TransactionType.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction in its wire shape."""

        payload: Dict[str, object] = {
            "id": self.transaction_id,
            "type": self.transaction_type.value,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date,
        }
        if self.tags is not None:
            payload["tags"] = list(self.tags)
        return payload


@dataclass(slots=True)
class Budget:
    """Spending ceiling for a category with its accumulated spend."""

    category: str
    limit: float
    spent: float = 0.0

    def as_dict(self) -> Dict[str, object]:
        """Export the budget in its wire shape."""

        return {"category": self.category, "limit": self.limit, "spent": self.spent}


@dataclass(frozen=True, slots=True)
class CategorySpending:
    """Total and share of one category within a breakdown."""

    category: str
    total: float
    percentage: float
    transaction_count: int

    def as_dict(self) -> Dict[str, object]:
        """Export the entry in its wire shape."""

        return {
            "category": self.category,
            "total": self.total,
            "percentage": self.percentage,
            "transactionCount": self.transaction_count,
        }


@dataclass(frozen=True, slots=True)
class TrendPoint:
    """Income and expenses accumulated in one trend bucket."""

    date: str
    income: float
    expenses: float

    @property
    def net(self) -> float:
        """Income minus expenses for the bucket."""

        return self.income - self.expenses

    def as_dict(self) -> Dict[str, object]:
        """Export the bucket in its wire shape."""

        return {
            "date": self.date,
            "income": self.income,
            "expenses": self.expenses,
            "net": self.net,
        }


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Totals over a filtered set of transactions."""

    total_income: float
    total_expenses: float
    transaction_count: int

    @property
    def balance(self) -> float:
        """Income minus expenses."""

        return self.total_income - self.total_expenses

    def as_dict(self) -> Dict[str, object]:
        """Export the summary in its wire shape."""

        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "balance": self.balance,
            "transactionCount": self.transaction_count,
        }


class BudgetStatus(str, Enum):
    """Health of a budget relative to its limit."""

    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True, slots=True)
class BudgetAlert:
    """Budget usage figures shown on dashboard cards."""

    category: str
    limit: float
    spent: float
    percent_used: float
    status: BudgetStatus = field(default=BudgetStatus.OK)

    @property
    def remaining(self) -> float:
        """Limit left after spend; negative once over budget."""

        return self.limit - self.spent

    def as_dict(self) -> Dict[str, object]:
        """Export the alert in its wire shape."""

        return {
            "category": self.category,
            "limit": self.limit,
            "spent": self.spent,
            "remaining": self.remaining,
            "percentUsed": self.percent_used,
            "status": self.status.value,
        }
