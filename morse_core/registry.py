"""
Scheme Registry
===============
Canonical morse table and the built-in encoding schemes derived from it.

Every built-in scheme is created once, at import, and never mutated.
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union
import structlog

from .config import DEFAULT_LETTER_GAP, DEFAULT_WORD_GAP
from .exceptions import ConfigurationError, InvalidVariantError
from .models import Code, EncodingScheme, MorseVariant, TransformRule
from .transform import render_code_table

logger = structlog.get_logger(__name__)

# International Morse, letters then digits
CANONICAL_CODES: Mapping[str, Code] = MappingProxyType({
    letter: Code.parse(code)
    for letter, code in (
        ("a", ".-"),
        ("b", "-..."),
        ("c", "-.-."),
        ("d", "-.."),
        ("e", "."),
        ("f", "..-."),
        ("g", "--."),
        ("h", "...."),
        ("i", ".."),
        ("j", ".---"),
        ("k", "-.-"),
        ("l", ".-.."),
        ("m", "--"),
        ("n", "-."),
        ("o", "---"),
        ("p", ".--."),
        ("q", "--.-"),
        ("r", ".-."),
        ("s", "..."),
        ("t", "-"),
        ("u", "..-"),
        ("v", "...-"),
        ("w", ".--"),
        ("x", "-..-"),
        ("y", "-.--"),
        ("z", "--.."),
        ("1", ".----"),
        ("2", "..---"),
        ("3", "...--"),
        ("4", "....-"),
        ("5", "....."),
        ("6", "-...."),
        ("7", "--..."),
        ("8", "---.."),
        ("9", "----."),
        ("0", "-----"),
    )
})

FANCY_RULE = TransformRule(short_mark="·", long_mark="−")
FANCIER_RULE = TransformRule(short_mark="▄", long_mark="▄▄▄", mark_separator=" ")
SPOKEN_RULE = TransformRule(
    short_mark="di",
    last_short_mark_override="dit",
    long_mark="dah",
    mark_separator=" ",
)
EMOJI_RULE = TransformRule(short_mark="☝️", long_mark="💨")


def build_scheme(
    name: str,
    rule: Optional[TransformRule] = None,
    letter_gap: str = DEFAULT_LETTER_GAP,
    word_gap: str = DEFAULT_WORD_GAP,
    table: Mapping[str, Optional[Code]] = CANONICAL_CODES,
) -> EncodingScheme:
    """
    Build a scheme by rendering a canonical table through a transform rule.

    Args:
        name: Informational scheme name
        rule: Transform rule (identity when omitted)
        letter_gap: Separator between letters of a word
        word_gap: Separator between words
        table: Canonical codes to render

    Returns:
        New EncodingScheme
    """
    return EncodingScheme(
        name=name,
        letter_gap=letter_gap,
        word_gap=word_gap,
        code_by_letter=render_code_table(table, rule),
    )


def derive_scheme(base: EncodingScheme, **overrides: Any) -> EncodingScheme:
    """
    Copy a scheme, replacing some of its fields.

    Usage:
        compact = derive_scheme(simple, name="compact", word_gap=" / ")

    Raises:
        ConfigurationError: If an override names an unknown field or
            produces an invalid scheme
    """
    fields = type(base).model_fields
    unknown = sorted(set(overrides) - set(fields))
    if unknown:
        logger.warning("scheme_override_rejected", base=base.name, fields=unknown)
        raise ConfigurationError(
            f"Unknown scheme field(s): {', '.join(unknown)}",
            details={"fields": unknown},
        )

    data = {name: getattr(base, name) for name in fields}
    data.update(overrides)
    return EncodingScheme(**data)


def _build_builtin_schemes() -> Mapping[str, EncodingScheme]:
    simple = build_scheme(MorseVariant.SIMPLE.value)
    schemes = (
        simple,
        derive_scheme(simple, name=MorseVariant.COMPACT.value, word_gap=" / "),
        derive_scheme(
            simple,
            name=MorseVariant.FANCY.value,
            code_by_letter=render_code_table(CANONICAL_CODES, FANCY_RULE),
        ),
        build_scheme(MorseVariant.FANCIER.value, FANCIER_RULE, letter_gap="   "),
        build_scheme(
            MorseVariant.SPOKEN.value,
            SPOKEN_RULE,
            letter_gap="   ",
            word_gap="," + DEFAULT_WORD_GAP,
        ),
        derive_scheme(
            simple,
            name=MorseVariant.EMOJI.value,
            code_by_letter=render_code_table(CANONICAL_CODES, EMOJI_RULE),
        ),
    )
    return MappingProxyType({scheme.name: scheme for scheme in schemes})


BUILTIN_SCHEMES: Mapping[str, EncodingScheme] = _build_builtin_schemes()


def list_variants() -> List[str]:
    """Get the names of all built-in schemes, in registry order."""
    return list(BUILTIN_SCHEMES)


def get_scheme(variant: Union[str, MorseVariant]) -> EncodingScheme:
    """
    Get a built-in scheme by variant name.

    Args:
        variant: Variant name or MorseVariant member

    Returns:
        The shared, immutable EncodingScheme

    Raises:
        InvalidVariantError: If no built-in scheme has that name
    """
    name = variant.value if isinstance(variant, MorseVariant) else variant
    try:
        return BUILTIN_SCHEMES[name]
    except (KeyError, TypeError):
        logger.warning("unknown_variant", variant=name)
        raise InvalidVariantError(name, available=list_variants()) from None
