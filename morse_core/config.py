"""
Encoder Configuration
=====================
Defaults for variant selection and input parsing.
"""

from dataclasses import dataclass

DEFAULT_VARIANT = "simple"
DEFAULT_INPUT_WORD_SEPARATOR = " "

# Gaps shared by most built-in schemes
DEFAULT_LETTER_GAP = " "
DEFAULT_WORD_GAP = " " * 7


@dataclass
class EncoderConfig:
    """Configuration for a MorseEncoder."""
    default_variant: str = DEFAULT_VARIANT
    input_word_separator: str = DEFAULT_INPUT_WORD_SEPARATOR
