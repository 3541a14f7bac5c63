"""Split a raw cron line into its six fields and validate their surface syntax.

The tokenizer is strict about the layout of the line: fields are separated by exactly one
space, so repeated or surrounding whitespace shows up as a wrong number of fields. Month and
day-of-week names are replaced by their numbers before the grammar is checked, which lets
ranges such as ``JUN-DEC`` go through the same rules as ``6-12``.
"""

from __future__ import annotations

__all__ = ["FieldSet", "substitute_symbols", "tokenize", "validate_field_syntax"]

from collections.abc import Mapping
import re
from typing import Final, NamedTuple

from typing_extensions import assert_never

from cronexp.common import (
    DAY_NAME_TO_INDEX,
    EXPECTED_FIELD_COUNT,
    FIELD_SEPARATOR,
    MONTH_NAME_TO_INDEX,
    FieldEnum,
)
from cronexp.errors import CronSyntaxError, FieldCountError

# int | int-int | * | */int | int/int | int-int/int
ELEMENT_PATTERN: Final = re.compile(r"[0-9]+(?:-[0-9]+)?(?:/[0-9]+)?|\*(?:/[0-9]+)?")


class FieldSet(NamedTuple):
    """The six raw fields of a cron expression, symbols already replaced by numbers."""

    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str
    command: str

    def temporal(self) -> tuple[tuple[FieldEnum, str], ...]:
        """Return the five temporal fields paired with their kind."""
        return tuple(zip(FieldEnum, self[:-1]))


def tokenize(raw: str) -> FieldSet:
    """Split *raw* into a :class:`FieldSet`.

    :param raw: Cron line with six fields separated by a single space.
    :returns: Validated fields; the command is returned untouched.
    :raises FieldCountError: If the line does not contain exactly six fields.
    :raises CronSyntaxError: If a temporal field breaks the grammar or the command is empty.
    """
    tokens = raw.split(FIELD_SEPARATOR)
    if len(tokens) != EXPECTED_FIELD_COUNT:
        raise FieldCountError(raw, EXPECTED_FIELD_COUNT, len(tokens))

    raw_fields = FieldSet(*tokens)
    fields: list[str] = []
    for field, token in raw_fields.temporal():
        value = substitute_symbols(token, _symbols_for(field))
        validate_field_syntax(value, expression=raw)
        fields.append(value)

    if not raw_fields.command:
        raise CronSyntaxError(raw, raw_fields.command, "command must not be empty")
    return FieldSet(*fields, raw_fields.command)


def substitute_symbols(value: str, symbols: Mapping[str, int] | None) -> str:
    """Replace every symbolic name in *value* by its number, ignoring case.

    The replacement works on the raw text, so ``"jun-dec"`` becomes ``"6-12"``.
    Without *symbols* the value is returned unchanged.
    """
    if not symbols:
        return value
    result = value.upper()
    for name, index in symbols.items():
        result = result.replace(name, str(index))
    return result


def validate_field_syntax(value: str, expression: str | None = None) -> None:
    """Check that every comma-separated element of *value* matches the field grammar.

    :param value: A single temporal field.
    :param expression: Text to report in the error, defaults to *value*.
    :raises CronSyntaxError: On the first element that does not match.
    """
    for element in value.split(","):
        if ELEMENT_PATTERN.fullmatch(element) is None:
            raise CronSyntaxError(expression if expression is not None else value, element)


def _symbols_for(field: FieldEnum) -> Mapping[str, int] | None:
    match field:
        case FieldEnum.MONTH:
            return MONTH_NAME_TO_INDEX
        case FieldEnum.DAY_OF_WEEK:
            return DAY_NAME_TO_INDEX
        case FieldEnum.MINUTE | FieldEnum.HOUR | FieldEnum.DAY_OF_MONTH:
            return None
        case _:
            assert_never(field)
