"""
Custom exceptions for the watch quote extractor.

The extraction pipeline itself is best-effort and never raises for malformed
transcript text. These errors cover caller precondition violations (non-text
input) and transport problems (undecodable uploads).
"""

from typing import Any


class WatchQuotesError(Exception):
    """Base exception for all watch quote extractor errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Pipeline Errors
# =============================================================================


class PipelineError(WatchQuotesError):
    """Base class for pipeline-related errors."""

    pass


class ValidationError(PipelineError):
    """Input validation failed (e.g. transcript is not text)."""

    pass


class DecodeError(PipelineError):
    """Upload payload could not be decoded into transcript text."""

    pass


# =============================================================================
# Error Handling Utilities
# =============================================================================


def wrap_decode_error(exc: Exception, context: dict[str, Any] | None = None) -> DecodeError:
    """
    Wrap a base64/unicode decoding exception in our typed error hierarchy.

    Args:
        exc: The original exception
        context: Additional context for debugging

    Returns:
        DecodeError carrying the original error details
    """
    ctx = context or {}
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    if isinstance(exc, UnicodeDecodeError):
        return DecodeError(
            f"Transcript is not valid UTF-8: {exc.reason}",
            context=ctx,
        )
    return DecodeError(
        f"Transcript content is not valid base64: {exc}",
        context=ctx,
    )
