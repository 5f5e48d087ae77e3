from __future__ import annotations


class FourPcClientError(Exception):
    """Base client error."""


class NetworkError(FourPcClientError):
    """Transport/network layer error."""


class ApiError(FourPcClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Token rejected by the bot API."""
