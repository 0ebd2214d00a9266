"""Service-layer exceptions."""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base error for score/auth service failures."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class AuthError(ServiceError):
    """Missing, invalid or insufficient credentials."""


class ValidationError(ServiceError):
    """Request payload rejected (bad username, negative score...)."""


class ServiceUnavailableError(ServiceError):
    """Transport failure: connection refused, timeout, DNS."""
