"""Unit tests for custom exception hierarchy."""

from core.exceptions import (
    ConfigurationError,
    ProviderError,
    ServiceError,
    TransportError,
    ValidationError,
)


def test_validation_error():
    """ValidationError should capture message and field."""

    error = ValidationError("Invalid hotkey", field="global_hotkey")
    assert error.message == "Invalid hotkey"
    assert error.field == "global_hotkey"
    assert isinstance(error, ServiceError)


def test_configuration_error():
    error = ConfigurationError("Missing key", key="OPENAI_API_KEY")
    assert error.key == "OPENAI_API_KEY"
    assert str(error) == "Missing key"


def test_transport_error_is_a_provider_error():
    """TransportError should retain the connectivity flag and original exception."""

    original = OSError("refused")
    error = TransportError("refused", connectivity=True, original_error=original)

    assert isinstance(error, ProviderError)
    assert isinstance(error, ServiceError)
    assert error.connectivity is True
    assert error.provider == "http"
    assert error.original_error is original


def test_transport_error_defaults_to_non_connectivity():
    assert TransportError("bad").connectivity is False
