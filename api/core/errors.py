"""
Error taxonomy shared by all feature packages.

Services raise these; `main.py` maps them to `{"error": ...}` JSON responses.
"""

from __future__ import annotations

from typing import Any


class ServiceError(RuntimeError):
    status_code = 500

    def __init__(self, message: str, *, details: list[Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


# Malformed input: unparseable body, wrong field types, out-of-range paging.
class BadRequestError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


# Any database-layer failure: connectivity, constraint violation, timeout.
class StorageError(ServiceError):
    status_code = 500


# Raised only during startup; fatal to the process.
class DatabaseStartupError(RuntimeError):
    pass
