"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from shipping_workflow.adapters.api_errors import (
    ApiError,
    BackendServiceCallFailedError,
    extract_error_hint,
)
from shipping_workflow.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a port call.
        default_code: Code used when ``exc`` is not an adapter error.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        UseCaseError: ``exc`` itself when already a use case error, otherwise a
        new error with a stable code.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, BackendServiceCallFailedError):
        if exc.cause is not None and exc.status is not None:
            return UseCaseError(
                "PACKAGE_RESPONSE_INVALID",
                _compose_error_message(
                    f"Package service response invalid (HTTP {exc.status})", exc.reason
                ),
            )
        # requests transport errors derive from OSError
        if isinstance(exc.cause, (TypeError, ValueError)) and not isinstance(exc.cause, OSError):
            return UseCaseError(
                "PACKAGE_REQUEST_INVALID",
                _compose_error_message("Package request invalid", exc.reason),
            )
        if exc.cause is not None:
            return UseCaseError(
                "PACKAGE_SERVICE_UNAVAILABLE",
                _compose_error_message("Package service unreachable", exc.reason),
            )
        status = exc.status or 0
        hint = extract_error_hint(exc.payload)
        label = f"{exc.reason} (HTTP {status})" if status else exc.reason
        if 400 <= status < 500:
            return UseCaseError(
                "PACKAGE_REJECTED",
                _compose_error_message(f"Package rejected: {label}", hint),
            )
        if 500 <= status < 600:
            return UseCaseError(
                "PACKAGE_SERVICE_ERROR",
                _compose_error_message(f"Package service error: {label}", hint),
            )
        return UseCaseError(
            "PACKAGE_CREATE_FAILED",
            _compose_error_message(f"Package not created: {label}", hint),
        )
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    """Compose a user-facing error message with optional hint text."""
    hint_text = (hint or "").strip()
    if hint_text and hint_text not in base:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
