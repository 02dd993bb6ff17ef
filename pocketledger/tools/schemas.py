"""Mini README: Parameter schemas for the ledger tools.

Structure:
    * ToolParams - base model accepting camelCase wire names or field names.
    * One model per tool describing its parameters.

These models are the boundary where categories are held to the fixed
``Category`` list and dates are checked for ISO-8601 form. The ledger itself
stays permissive.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from ..ledger.models import Category, TransactionType, parse_iso_date
from ..ledger.queries import TrendGranularity


def _check_iso(value: str) -> str:
    parse_iso_date(value)
    return value


IsoDate = Annotated[str, AfterValidator(_check_iso)]


class ToolParams(BaseModel):
    """Shared configuration for tool parameter models."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class DateRangeParams(ToolParams):
    start_date: Optional[IsoDate] = Field(None, alias="startDate", description="Inclusive ISO start date")
    end_date: Optional[IsoDate] = Field(None, alias="endDate", description="Inclusive ISO end date")


class AddTransactionParams(ToolParams):
    transaction_type: TransactionType = Field(alias="type", description="Transaction type")
    amount: float = Field(description="Transaction amount")
    category: Category = Field(description="Transaction category")
    description: str = Field(description="Transaction description")
    date: IsoDate = Field(description="Transaction date (ISO format)")
    tags: Optional[List[str]] = Field(None, description="Optional tags")


class GetTransactionsParams(DateRangeParams):
    transaction_type: Optional[TransactionType] = Field(None, alias="type")
    category: Optional[Category] = None
    limit: Optional[int] = Field(None, description="Maximum number of transactions to return")


class SpendingByCategoryParams(DateRangeParams):
    transaction_type: Optional[TransactionType] = Field(
        None, alias="type", description="Defaults to expense when omitted"
    )


class SpendingTrendParams(DateRangeParams):
    group_by: TrendGranularity = Field(TrendGranularity.DAY, alias="groupBy")


class SummaryParams(DateRangeParams):
    pass


class SetBudgetParams(ToolParams):
    category: Category = Field(description="Budget category")
    limit: float = Field(description="Budget limit amount")


class NoParams(ToolParams):
    pass
