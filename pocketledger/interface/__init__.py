"""Mini README: HTTP interface for pocketledger.

Exports the FastAPI application factory used by the launcher script and by
tests through ``fastapi.testclient``.
"""

from .web_app import create_application

__all__ = ["create_application"]
