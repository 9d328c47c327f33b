"""
Morse Models
============
Data models and enums for codes, transform rules and encoding schemes.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple, FrozenSet

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError, InvalidCodeError


class Mark(str, Enum):
    """Atomic morse signal units, valued by their canonical glyph."""
    SHORT = "."
    LONG = "-"


class MorseVariant(str, Enum):
    """Built-in encoding scheme names."""
    SIMPLE = "simple"
    COMPACT = "compact"
    FANCY = "fancy"
    FANCIER = "fancier"
    SPOKEN = "spoken"
    EMOJI = "emoji"


@dataclass(frozen=True)
class Code:
    """
    An ordered sequence of marks for one letter or digit.

    The canonical form is a dot/dash string, e.g. ``Code.parse("-.--")``.
    """
    marks: Tuple[Mark, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "Code":
        """
        Build a code from its dot/dash form.

        Raises:
            InvalidCodeError: If text holds anything besides '.' and '-'
        """
        marks = []
        for position, char in enumerate(text):
            try:
                marks.append(Mark(char))
            except ValueError:
                raise InvalidCodeError(
                    f"Invalid mark {char!r} at position {position} in code {text!r}",
                    details={"code": text, "position": position},
                ) from None
        return cls(tuple(marks))

    @property
    def last(self) -> Optional[Mark]:
        return self.marks[-1] if self.marks else None

    def __iter__(self) -> Iterator[Mark]:
        return iter(self.marks)

    def __len__(self) -> int:
        return len(self.marks)

    def __str__(self) -> str:
        return "".join(mark.value for mark in self.marks)


@dataclass(frozen=True)
class TransformRule:
    """Substitution strings used to render a canonical code in another alphabet."""
    short_mark: str = Mark.SHORT.value
    long_mark: str = Mark.LONG.value
    mark_separator: str = ""
    last_short_mark_override: Optional[str] = None  # Applies to a trailing SHORT only

    @property
    def last_short_mark(self) -> str:
        if self.last_short_mark_override is None:
            return self.short_mark
        return self.last_short_mark_override


def _configuration_error(error: ValidationError) -> ConfigurationError:
    return ConfigurationError(
        f"Invalid encoding scheme: {error.error_count()} error(s)",
        details=error.errors(include_url=False, include_context=False),
    )


class EncodingScheme(BaseModel):
    """
    A complete rendering configuration.

    ``code_by_letter`` maps single lower-case characters to codes already
    rendered in the scheme's alphabet. Letters that are missing, or mapped
    to None, are unsupported and get skipped by the encoder.

    Raises:
        ConfigurationError: If a required field is missing or malformed
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "custom"
    letter_gap: str
    word_gap: str
    code_by_letter: Mapping[str, Optional[str]]

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _configuration_error(e) from e

    @classmethod
    def model_validate(cls, obj: Any, *args, **kwargs) -> "EncodingScheme":
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as e:
            raise _configuration_error(e) from e

    def __hash__(self) -> int:
        return hash((
            self.name,
            self.letter_gap,
            self.word_gap,
            frozenset(self.code_by_letter.items()),
        ))

    @field_validator("code_by_letter")
    @classmethod
    def _check_letters(cls, value: Mapping[str, Optional[str]]) -> Mapping[str, Optional[str]]:
        invalid = [key for key in value if len(key) != 1 or key != key.lower()]
        if invalid:
            raise ValueError(
                f"keys must be single lower-case characters, got {invalid!r}"
            )
        return MappingProxyType(dict(value))

    def lookup(self, letter: str) -> Optional[str]:
        """Return the rendered code for a letter, or None when unsupported."""
        return self.code_by_letter.get(letter)

    @property
    def supported_letters(self) -> FrozenSet[str]:
        return frozenset(
            letter for letter, code in self.code_by_letter.items() if code is not None
        )
