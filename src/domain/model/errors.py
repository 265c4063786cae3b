"""Domain-level exceptions.

Services raise these errors to express lookup failures.
Route handlers catch them and map them to `{"error": ...}` responses.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule (empty word, bad etymology word)."""


class UnsupportedLanguageError(ValidationError):
    """Requested source language is not supported by the phrase translator."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported source language: {code}")


class NotFoundError(DomainError):
    """The data source answered but had nothing for the word."""


class UpstreamError(DomainError):
    """An external API failed: non-success status, timeout or malformed payload."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")


class LookupFailedError(DomainError):
    """Every mandatory sub-lookup of a request was rejected."""


class BuildAbortedError(DomainError):
    """Offline table build cannot start because required inputs are missing."""
