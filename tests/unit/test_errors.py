"""Tests for custom errors."""
from src.utils.errors import (
    AmountParseError,
    ConfigurationError,
    ConversionError,
    CurrencyConverterError,
    DecodeError,
    ServiceError,
    TransportError,
    ValidationError,
)


def test_error_hierarchy():
    """Test error inheritance."""
    assert issubclass(ConfigurationError, CurrencyConverterError)
    assert issubclass(ValidationError, CurrencyConverterError)
    assert issubclass(AmountParseError, ValidationError)
    for kind in (TransportError, ServiceError, DecodeError):
        assert issubclass(kind, ConversionError)
    assert not issubclass(AmountParseError, ConversionError)


def test_error_messages():
    """Test error messages."""
    error = ConfigurationError("Test message")
    assert str(error) == "Test message"


def test_amount_parse_error_keeps_text():
    error = AmountParseError("abc")
    assert error.text == "abc"
    assert "abc" in str(error)


def test_service_error_type():
    error = ServiceError("Conversion failed: invalid-key", error_type="invalid-key")
    assert error.error_type == "invalid-key"
    assert ServiceError("boom").error_type == "unknown"
