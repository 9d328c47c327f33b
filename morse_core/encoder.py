"""
Morse Encoder
=============
Encode text with a built-in or custom encoding scheme.
"""

from typing import Any, List, Mapping, Optional, Set, Union
import structlog

from .config import DEFAULT_INPUT_WORD_SEPARATOR, EncoderConfig
from .exceptions import ConfigurationError
from .models import EncodingScheme, MorseVariant
from .registry import get_scheme

logger = structlog.get_logger(__name__)

SchemeLike = Union[EncodingScheme, Mapping[str, Any]]


def split_words(text: str, separator: str) -> List[str]:
    """
    Split text into words on an exact separator.

    An empty separator makes every character its own word.
    """
    if not separator:
        return list(text)
    return text.split(separator)


def encode_word(word: str, scheme: EncodingScheme) -> str:
    """
    Encode a single lower-cased word.

    Characters the scheme has no code for are dropped, and add no gap.

    Args:
        word: Word to encode
        scheme: Encoding scheme

    Returns:
        Codes of the supported letters joined with the scheme's letter gap
    """
    codes = []
    for letter in word:
        code = scheme.lookup(letter)
        if code is not None:
            codes.append(code)
    return scheme.letter_gap.join(codes)


def find_unsupported_characters(
    text: str,
    scheme: Optional[EncodingScheme] = None,
    input_word_separator: str = DEFAULT_INPUT_WORD_SEPARATOR,
) -> Set[str]:
    """
    Find the characters of a text that a scheme would skip.

    Args:
        text: Text to check
        scheme: Encoding scheme (simple when omitted)
        input_word_separator: Separator that is not counted as unsupported

    Returns:
        Set of lower-cased unsupported characters
    """
    scheme = scheme or get_scheme(MorseVariant.SIMPLE)
    unsupported = set()
    for word in split_words(text.lower(), input_word_separator):
        for letter in word:
            if scheme.lookup(letter) is None:
                unsupported.add(letter)
    return unsupported


def _coerce_scheme(encoding: SchemeLike) -> EncodingScheme:
    if isinstance(encoding, EncodingScheme):
        return encoding
    if isinstance(encoding, Mapping):
        return EncodingScheme(**encoding)
    raise ConfigurationError(
        f"Expected an EncodingScheme or a mapping, got {type(encoding).__name__}",
        details={"type": type(encoding).__name__},
    )


class MorseEncoder:
    """Text to morse encoder."""

    def __init__(self, config: Optional[EncoderConfig] = None):
        self.config = config or EncoderConfig()

    def resolve_scheme(
        self,
        variant: Optional[Union[str, MorseVariant]] = None,
        encoding: Optional[SchemeLike] = None,
    ) -> EncodingScheme:
        """
        Pick the scheme for an encode call.

        A custom encoding wins over the variant name.

        Raises:
            InvalidVariantError: If the variant is unknown and no encoding is given
            ConfigurationError: If the custom encoding is malformed
        """
        if encoding is not None:
            return _coerce_scheme(encoding)
        return get_scheme(self.config.default_variant if variant is None else variant)

    def encode(
        self,
        text: str,
        variant: Optional[Union[str, MorseVariant]] = None,
        input_word_separator: Optional[str] = None,
        encoding: Optional[SchemeLike] = None,
    ) -> str:
        """
        Encode text in morse code.

        Supports the 26 basic latin letters and the 10 arabic numerals
        for built-in schemes. Unsupported characters are skipped.

        Example:
            >>> encoder = MorseEncoder()
            >>> encoder.encode("SOS SOS", variant="compact")
            '... --- ... / ... --- ...'

        Args:
            text: Input text
            variant: Built-in scheme name (config default when omitted)
            input_word_separator: Separator between words of the input
            encoding: Custom scheme, takes precedence over variant

        Returns:
            Encoded text

        Raises:
            InvalidVariantError: If the variant is unknown
            ConfigurationError: If the scheme is malformed
        """
        scheme = self.resolve_scheme(variant, encoding)
        separator = (
            self.config.input_word_separator
            if input_word_separator is None
            else input_word_separator
        )
        words = split_words(text.lower(), separator)
        encoded = scheme.word_gap.join(encode_word(word, scheme) for word in words)

        logger.debug(
            "text_encoded",
            scheme=scheme.name,
            words=len(words),
            input_length=len(text),
            output_length=len(encoded),
        )
        return encoded


_default_encoder = MorseEncoder()


def encode(
    text: str,
    variant: Optional[Union[str, MorseVariant]] = None,
    input_word_separator: Optional[str] = None,
    encoding: Optional[SchemeLike] = None,
) -> str:
    """
    Encode text with the default encoder.

    Usage:
        encode("SOS")                      # "... --- ..."
        encode("SOS", variant="spoken")    # "di di dit   dah dah dah   di di dit"
    """
    return _default_encoder.encode(
        text,
        variant=variant,
        input_word_separator=input_word_separator,
        encoding=encoding,
    )
