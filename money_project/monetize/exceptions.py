class MonetizeError(Exception):
    """Base class for errors raised by the monetize app."""
    pass


class ConfigurationError(MonetizeError):
    """Raised when a monetized attribute is declared with invalid options
    (unknown column, non-integer column, colliding accessor name, ...)."""
    pass


class UnknownCurrency(MonetizeError, LookupError):
    """Raised when a currency code or symbol is not in the registry."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unknown currency {code!r}")


class FormatError(MonetizeError, ValueError):
    """Raised by the parser when a value cannot be read as a money amount.

    Never escapes a monetized setter: the accessor records it and the
    validation pass reports it against the public attribute name.
    """

    def __init__(self, value, message="invalid decimal format"):
        self.value = value
        super().__init__(message)
