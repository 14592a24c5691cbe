"""Custom exception classes for the Currency Converter."""


class CurrencyConverterError(Exception):
    """Base exception for all Currency Converter errors."""
    pass


class ConfigurationError(CurrencyConverterError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(CurrencyConverterError):
    """Raised when data validation fails."""
    pass


class AmountParseError(ValidationError):
    """Raised when the typed amount is not a non-negative number."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid amount: {text!r}")


class ConversionError(CurrencyConverterError):
    """Base exception for conversion service errors."""
    pass


class TransportError(ConversionError):
    """Raised when the remote lookup cannot be completed (network/IO)."""
    pass


class ServiceError(ConversionError):
    """Raised when the remote service reports an unsuccessful result."""

    def __init__(self, message: str, error_type: str = "unknown"):
        self.error_type = error_type
        super().__init__(message)


class DecodeError(ConversionError):
    """Raised when the response cannot be interpreted."""
    pass
