"""Mini README: Registry of named, schema-described ledger tools.

Structure:
    * LedgerTool - name, description, parameter model and handler.
    * ToolInvocationError - raised when parameters fail validation.
    * ToolRegistry - registration, discovery and async invocation.

Remote callers expect every operation to return an awaitable. ``invoke`` is
a coroutine for that reason only: it validates parameters, runs the
synchronous ledger call and returns JSON-ready data without suspending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..ledger.service import LedgerService
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ToolHandler = Callable[[LedgerService, Any], Any]


class ToolInvocationError(ValueError):
    """Raised when a tool is called with parameters that fail its schema."""

    def __init__(self, tool_name: str, error: ValidationError) -> None:
        super().__init__(f"Invalid parameters for tool '{tool_name}': {error.error_count()} error(s)")
        self.tool_name = tool_name
        self.errors = error.errors(include_url=False, include_context=False)


@dataclass(frozen=True, slots=True)
class LedgerTool:
    """A ledger operation exposed to remote callers."""

    name: str
    description: str
    params_model: Type[BaseModel]
    handler: ToolHandler

    def schema(self) -> Dict[str, Any]:
        """Describe the tool with its JSON parameter schema."""

        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.params_model.model_json_schema(by_alias=True),
        }


class ToolRegistry:
    """Map tool names to ledger operations bound to one service."""

    def __init__(self, service: LedgerService, tools: Iterable[LedgerTool] = ()) -> None:
        self.service = service
        self._tools: Dict[str, LedgerTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: LedgerTool) -> None:
        """Register a tool, replacing any previous tool with the same name."""

        LOGGER.debug("Registering tool '%s'", tool.name)
        self._tools[tool.name] = tool

    def available_tools(self) -> List[str]:
        """Return registered tool names in sorted order."""

        return sorted(self._tools.keys())

    def get(self, name: str) -> LedgerTool:
        """Return a tool, raising ``KeyError`` for unknown names."""

        tool = self._tools.get(name)
        if tool is None:
            raise KeyError(f"Unknown tool '{name}'")
        return tool

    def describe(self) -> List[Dict[str, Any]]:
        """Return the schema of every registered tool, ordered by name."""

        return [self._tools[name].schema() for name in self.available_tools()]

    async def invoke(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Validate ``params`` against the tool schema and run it."""

        tool = self.get(name)
        try:
            parsed = tool.params_model.model_validate(dict(params or {}))
        except ValidationError as error:
            LOGGER.warning("Rejected call to '%s': %s", name, error.error_count())
            raise ToolInvocationError(name, error) from error
        LOGGER.debug("Invoking tool '%s'", name)
        return tool.handler(self.service, parsed)
