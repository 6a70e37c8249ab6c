"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error taxonomy shared by the store, the generator and the service layer.
"""

from __future__ import annotations


class GenAPIError(RuntimeError):
    """Base class for genapi errors."""


class ConfigurationError(GenAPIError):
    """Raised when required credentials or settings are missing."""


class TransportError(GenAPIError):
    """Raised when a persistent store call fails (network, auth, timeout)."""


class ExtractionError(GenAPIError):
    """Raised when response text holds no parseable JSON."""


class GenerationError(GenAPIError):
    """
    Raised when every generation attempt failed.

    Attributes:
        last_cause: The error recorded on the final attempt.
        attempts: Total number of attempts made.
    """

    def __init__(
        self,
        message: str,
        *,
        last_cause: BaseException | None = None,
        attempts: int = 0,
    ) -> None:
        super().__init__(message)
        self.last_cause = last_cause
        self.attempts = attempts


class AccessDeniedError(GenAPIError):
    """Raised when a private record is read without its secret."""
