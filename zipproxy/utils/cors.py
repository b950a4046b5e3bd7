"""Single-origin CORS gating."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import MethodNotAllowed

ALLOWED_METHODS = ("GET", "HEAD", "OPTIONS")
PREFLIGHT_MAX_AGE_SECONDS = 86400


@dataclass(frozen=True)
class CorsDecision:
    allowed: bool
    headers: dict[str, str] = field(default_factory=dict)


def preflight_headers(allowed_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": str(PREFLIGHT_MAX_AGE_SECONDS),
    }


def resolve_origin(origin: str | None, allowed_origin: str) -> str | None:
    """Return the configured origin when the caller's origin matches it."""
    if origin is not None and origin == allowed_origin:
        return allowed_origin
    return None


def evaluate(method: str, origin: str | None, allowed_origin: str) -> CorsDecision:
    """Classify a request before any search logic runs.

    OPTIONS and HEAD always receive headers naming the configured origin,
    never the caller's, so a mismatched caller learns which origin is
    permitted without being granted access. GET requests only carry CORS
    headers when the caller's origin is the configured one.
    """
    method = method.upper()
    if method not in ALLOWED_METHODS:
        raise MethodNotAllowed(method)

    matched = resolve_origin(origin, allowed_origin)
    if method in ("OPTIONS", "HEAD"):
        return CorsDecision(allowed=matched is not None, headers=preflight_headers(allowed_origin))
    if matched is None:
        return CorsDecision(allowed=False)
    return CorsDecision(allowed=True, headers={"Access-Control-Allow-Origin": matched, "Vary": "Origin"})
