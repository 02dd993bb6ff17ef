"""Mini README: Schema-described async operations over the ledger.

Remote tool callers discover operations through ``ToolRegistry.describe``
and run them with ``await registry.invoke(name, params)``. ``build_registry``
wires the default tool set to a ``LedgerService``.
"""

from .catalog import DEFAULT_TOOLS, build_registry
from .registry import LedgerTool, ToolInvocationError, ToolRegistry

__all__ = [
    "DEFAULT_TOOLS",
    "LedgerTool",
    "ToolInvocationError",
    "ToolRegistry",
    "build_registry",
]
