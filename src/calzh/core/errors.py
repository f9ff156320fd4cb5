class CalzhError(Exception):
    """Base error."""

class ConverterUnavailableError(CalzhError):
    """Raised when a conversion backend's library is not installed."""

class UnknownConverterError(CalzhError, KeyError):
    """Raised when a converter name is not in the registry."""

class ConversionError(CalzhError):
    """Raised when a backend cannot map a date to the lunar calendar."""

class ConfigurationError(CalzhError, ValueError):
    """Raised for invalid configuration values."""
