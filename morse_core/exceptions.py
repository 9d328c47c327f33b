"""
Morse Exceptions
================
Exception classes raised by the encoding engine.
"""

from typing import Optional, Any, Sequence


class MorseError(Exception):
    """Base exception for all morse-core errors."""
    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidVariantError(MorseError, LookupError):
    """Raised when a variant name does not match any built-in scheme."""
    def __init__(self, variant: str, available: Optional[Sequence[str]] = None):
        self.variant = variant
        self.available = list(available or [])
        super().__init__(
            f"Unknown morse variant '{variant}'. "
            f"Available: {', '.join(self.available) or 'none'}",
            details={"variant": variant, "available": self.available},
        )


class ConfigurationError(MorseError, ValueError):
    """Raised when a scheme or encoder option is malformed."""
    pass


class InvalidCodeError(MorseError, ValueError):
    """Raised when a canonical code contains anything but dots and dashes."""
    pass
