"""Domain error classes.

Transport-agnostic errors that represent catalog loading failures.
The table component turns them into the single user-facing error message.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains the error information that the presentation layer
    needs to explain a failure to the user.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., status codes, API codes)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for logging and presentation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class CatalogFetchError(DomainError):
    """Base class for failures while fetching the vehicle catalog.

    Every subclass is shown to the user verbatim through `message`.
    """

    error_code: str = "CATALOG_FETCH_ERROR"


class NetworkError(CatalogFetchError):
    """The transport answered with a non-success status, or not at all.

    Examples:
        - HTTP 500 from the catalog API -> "Network error (500)"
        - Connection refused / timeout -> "Network error"
    """

    error_code: str = "NETWORK_ERROR"

    def __init__(self, status_code: int | None = None, **context: Any) -> None:
        """Create a network error.

        Args:
            status_code: HTTP status code returned by the API, if any
            **context: Additional context
        """
        self.status_code = status_code
        if status_code is not None:
            message = f"Network error ({status_code})"
        else:
            message = "Network error"

        super().__init__(message, status_code=status_code, **context)


class ApiError(CatalogFetchError):
    """The transport succeeded but the payload reported a failure.

    Examples:
        - {"status": "error", "error": {"message": "INVALID_APPLICATION_ID"}}
        - A body that is not a valid catalog payload
    """

    error_code: str = "API_ERROR"

    DEFAULT_MESSAGE = "API returned an error"

    def __init__(
        self,
        message: str | None = None,
        api_code: str | None = None,
        **context: Any,
    ) -> None:
        """Create an API error.

        Args:
            message: Message reported by the API (falls back to a generic one)
            api_code: Error code reported by the API, if any
            **context: Additional context
        """
        self.api_code = api_code
        super().__init__(message or self.DEFAULT_MESSAGE, api_code=api_code, **context)


class FetchCancelled(DomainError):
    """A load attempt was cancelled before it completed.

    Not a user-facing error: callers absorb it without changing state.
    """

    error_code: str = "CANCELLED"

    def __init__(self, message: str = "Catalog fetch was cancelled", **context: Any) -> None:
        super().__init__(message, **context)
