"""Mini README: FastAPI service exposing the ledger tools over HTTP.

Structure:
    * create_application - application factory wiring the tool registry.

Routes:
    * ``GET /`` - dashboard payload with summary, budget alerts and recent activity.
    * ``GET /tools`` - name, description and parameter schema of every tool.
    * ``POST /tools/{name}`` - run a tool with a JSON object of parameters.

Ledger errors map to 400, schema violations to 422 and unknown tools to 404.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..ledger import LedgerError, LedgerService
from ..logging_utils import get_logger
from ..tools import ToolInvocationError, ToolRegistry, build_registry

LOGGER = get_logger(__name__)

RECENT_TRANSACTION_COUNT = 5


def create_application(registry: Optional[ToolRegistry] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to one ledger."""

    settings = get_settings()
    if registry is None:
        registry = build_registry(LedgerService.from_settings(settings))

    app = FastAPI(title="pocketledger", version="0.1.0")
    app.state.registry = registry

    @app.get("/")
    async def dashboard() -> JSONResponse:
        """Return the figures shown on the finance dashboard."""

        service = registry.service
        summary = service.get_summary()
        alerts = service.get_budget_alerts()
        recent = service.get_transactions(limit=RECENT_TRANSACTION_COUNT)
        LOGGER.debug(
            "Dashboard -> transactions: %s balance: %.2f budgets: %s",
            summary.transaction_count,
            summary.balance,
            len(alerts),
        )
        return JSONResponse(
            {
                "environment": settings.environment,
                "summary": summary.as_dict(),
                "budgets": [alert.as_dict() for alert in alerts],
                "recentTransactions": [transaction.as_dict() for transaction in recent],
            }
        )

    @app.get("/tools")
    async def list_tools() -> JSONResponse:
        """Describe every registered tool."""

        return JSONResponse({"tools": registry.describe()})

    @app.post("/tools/{name}")
    async def invoke_tool(
        name: str,
        params: Optional[Dict[str, Any]] = Body(None),
    ) -> JSONResponse:
        """Run a tool and return its result."""

        try:
            registry.get(name)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        try:
            result = await registry.invoke(name, params)
        except ToolInvocationError as error:
            raise HTTPException(status_code=422, detail=error.errors) from error
        except LedgerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Tool '%s' completed", name)
        return JSONResponse({"tool": name, "result": result})

    return app
