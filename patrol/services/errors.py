"""Exceptions shared by the store services."""
from __future__ import annotations


class DispatchError(Exception):
    """Base class for request-scoped store errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DispatchError):
    """Raised when a required field is missing; nothing was mutated."""


class ReportNotFoundError(DispatchError):
    """Raised when no report has the requested id; nothing was mutated."""

    status_code = 404
