"""Error taxonomy shared by validation, CORS gating and backends."""
from __future__ import annotations


class SearchProxyError(Exception):
    status_code = 500
    message = "Internal Server Error"


class BadRequest(SearchProxyError):
    status_code = 400
    message = "Bad Request"


class MethodNotAllowed(SearchProxyError):
    status_code = 405
    message = "Method Not Allowed"

    def __init__(self, method: str) -> None:
        super().__init__(f"method {method} is not allowed")
        self.method = method


class BackendError(SearchProxyError):
    """Any failure talking to the backend store. Always surfaces as a 500."""

    kind = "backend_error"


class UnexpectedCall(BackendError):
    """A result parser was called without a response to parse."""

    kind = "unexpected_call"


class InvalidResponse(BackendError):
    kind = "invalid_response"


class BackendUnavailable(BackendError):
    kind = "backend_unavailable"
