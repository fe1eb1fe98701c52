"""Tests for domain error classes."""

from tanks_lite.domain.errors import (
    ApiError,
    CatalogFetchError,
    DomainError,
    FetchCancelled,
    NetworkError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_creates_error_with_context(self) -> None:
        """DomainError stores additional context."""
        error = DomainError("Error occurred", resource="Vehicle", action="load")

        assert error.context == {"resource": "Vehicle", "action": "load"}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="test", value=123)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "test",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestNetworkError:
    """Tests for NetworkError class."""

    def test_message_embeds_status_code(self) -> None:
        error = NetworkError(status_code=500)

        assert error.status_code == 500
        assert error.message == "Network error (500)"
        assert "500" in str(error)
        assert error.error_code == "NETWORK_ERROR"

    def test_without_status_code(self) -> None:
        """Transport failures without a response have no status code."""
        error = NetworkError()

        assert error.status_code is None
        assert error.message == "Network error"

    def test_to_dict_includes_status_code(self) -> None:
        assert NetworkError(status_code=503).to_dict() == {
            "message": "Network error (503)",
            "code": "NETWORK_ERROR",
            "status_code": 503,
        }

    def test_is_catalog_fetch_error(self) -> None:
        assert isinstance(NetworkError(404), CatalogFetchError)
        assert isinstance(NetworkError(404), DomainError)


class TestApiError:
    """Tests for ApiError class."""

    def test_uses_payload_message(self) -> None:
        error = ApiError("INVALID_APPLICATION_ID", api_code="407")

        assert error.message == "INVALID_APPLICATION_ID"
        assert error.api_code == "407"
        assert error.error_code == "API_ERROR"

    def test_falls_back_to_generic_message(self) -> None:
        assert ApiError().message == ApiError.DEFAULT_MESSAGE
        assert ApiError("").message == ApiError.DEFAULT_MESSAGE

    def test_is_catalog_fetch_error(self) -> None:
        assert isinstance(ApiError(), CatalogFetchError)


class TestFetchCancelled:
    """Tests for FetchCancelled class."""

    def test_is_not_a_catalog_fetch_error(self) -> None:
        """Cancellation is never shown to the user."""
        error = FetchCancelled(sequence=3)

        assert not isinstance(error, CatalogFetchError)
        assert error.error_code == "CANCELLED"
        assert error.context == {"sequence": 3}
