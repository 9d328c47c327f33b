"""
Morse Core Library
==================
Text to morse code encoding with built-in and custom symbol schemes.
"""

__version__ = "0.1.0"

# Models
from morse_core.models import (
    Mark,
    Code,
    TransformRule,
    EncodingScheme,
    MorseVariant,
)

# Exceptions
from morse_core.exceptions import (
    MorseError,
    InvalidVariantError,
    ConfigurationError,
    InvalidCodeError,
)

# Config
from morse_core.config import EncoderConfig

# Transform
from morse_core.transform import render_code, render_code_table

# Registry
from morse_core.registry import (
    BUILTIN_SCHEMES,
    CANONICAL_CODES,
    get_scheme,
    list_variants,
    derive_scheme,
    build_scheme,
)

# Encoder
from morse_core.encoder import (
    MorseEncoder,
    encode,
    encode_word,
    find_unsupported_characters,
)

# Logging
from morse_core.log_setup import setup_logging

__all__ = [
    # Models
    "Mark",
    "Code",
    "TransformRule",
    "EncodingScheme",
    "MorseVariant",
    # Exceptions
    "MorseError",
    "InvalidVariantError",
    "ConfigurationError",
    "InvalidCodeError",
    # Config
    "EncoderConfig",
    # Transform
    "render_code",
    "render_code_table",
    # Registry
    "BUILTIN_SCHEMES",
    "CANONICAL_CODES",
    "get_scheme",
    "list_variants",
    "derive_scheme",
    "build_scheme",
    # Encoder
    "MorseEncoder",
    "encode",
    "encode_word",
    "find_unsupported_characters",
    # Logging
    "setup_logging",
]
