"""Project-native typed exceptions for backend client failures."""

from __future__ import annotations


class BackendClientError(Exception):
    """Base exception for backend client failures.

    Attributes:
        message: Human-readable failure description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(BackendClientError, ValueError):
    """Caller-supplied input was rejected before any network call."""


class InternalError(BackendClientError, RuntimeError):
    """Transport or response-parsing failure downstream of request construction."""
