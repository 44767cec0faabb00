"""
Domain exceptions.

Typed exceptions for explicit error handling.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - Invalid input format
    - Out of range values

    Example:
        >>> raise ValidationError("Value cannot be empty")
    """

    pass


class InvalidHbA1cError(ValidationError):
    """
    HbA1c reading is not a number in the accepted range (0, 25].

    Reported inline to the user; no request is sent upstream.

    Example:
        >>> raise InvalidHbA1cError("HbA1c out of range: 30.0")
    """

    pass


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ExternalServiceError(DomainError):
    """
    External service call failed.

    Base class for all external service errors.
    """

    pass


class GenerationError(ExternalServiceError):
    """
    Diet plan generation failed.

    Raised when:
    - The text generation API call fails (network, quota, auth)
    - The model output is not valid JSON
    - The JSON does not have the diet plan shape

    The original cause is chained (``raise ... from e``) and logged;
    users only ever see a fixed message.

    Example:
        >>> raise GenerationError("Model output is not valid JSON")
    """

    pass


# ═══════════════════════════════════════════════════════════
# PRESENTATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class SubmissionInProgressError(DomainError):
    """
    A plan request is already running for this page.

    Raised when submit is called again before the previous
    submission settled.
    """

    pass
