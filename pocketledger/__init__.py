"""Mini README: Core package initializer for pocketledger.

pocketledger is an in-memory personal finance ledger: it records income and
expense transactions, keeps per-category budgets in step with spending, and
answers the aggregate queries (category breakdowns, trends, summaries) that
drive dashboards and budget alerts. Subpackages:

    * ledger - store, budget synchroniser, query engine and service facade.
    * tools - schema-described async operations for remote tool callers.
    * interface - FastAPI application exposing the tools over HTTP.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
