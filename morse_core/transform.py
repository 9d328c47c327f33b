"""
Code Transform
==============
Render canonical dot/dash codes into arbitrary symbol alphabets.
"""

from typing import Dict, Mapping, Optional, Union

from .models import Code, Mark, TransformRule

IDENTITY_RULE = TransformRule()


def render_code(code: Union[Code, str], rule: Optional[TransformRule] = None) -> str:
    """
    Render a canonical code with a transform rule.

    Dashes become ``rule.long_mark`` and dots become ``rule.short_mark``,
    except a dot in the last position which becomes ``rule.last_short_mark``.
    Rendered marks are joined with ``rule.mark_separator``.

    Example:
        >>> rule = TransformRule(short_mark="di", last_short_mark_override="dit",
        ...                      long_mark="dah", mark_separator=" ")
        >>> render_code("-.--", rule)
        'dah di dah dah'

    Args:
        code: Canonical code, as a Code or a dot/dash string
        rule: Transform rule (identity when omitted)

    Returns:
        Rendered code string

    Raises:
        InvalidCodeError: If a string code is not made of dots and dashes
    """
    if isinstance(code, str):
        code = Code.parse(code)
    rule = rule or IDENTITY_RULE

    last_index = len(code) - 1
    rendered = []
    for index, mark in enumerate(code):
        if mark == Mark.LONG:
            rendered.append(rule.long_mark)
        elif index == last_index:
            rendered.append(rule.last_short_mark)
        else:
            rendered.append(rule.short_mark)
    return rule.mark_separator.join(rendered)


def render_code_table(
    table: Mapping[str, Optional[Union[Code, str]]],
    rule: Optional[TransformRule] = None,
) -> Dict[str, Optional[str]]:
    """
    Render every code of a letter table, keeping keys and their order.

    Entries without a code stay None.

    Args:
        table: Mapping of letter to canonical code
        rule: Transform rule (identity when omitted)

    Returns:
        New mapping of letter to rendered code
    """
    return {
        letter: None if code is None else render_code(code, rule)
        for letter, code in table.items()
    }
