"""Module containing cronexp errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronexp.common import AllowedRange, FieldEnum


class CronexpError(Exception):
    """Base class for all cronexp errors."""


class FieldCountError(CronexpError, ValueError):
    """Raised when an expression does not split into the expected number of fields."""

    def __init__(self, expression: str, expected: int, found: int) -> None:
        self.expression = expression
        self.expected = expected
        self.found = found
        super().__init__(
            f"Number of fields incorrect for {expression!r}, found {found} and expected {expected}"
        )


class CronSyntaxError(CronexpError, ValueError):
    """Raised when an element does not follow the field grammar.

    ``expression`` is the text that was being processed (the whole input for the tokenizer,
    a single field for the expander) and ``token`` is the offending piece of it.
    """

    def __init__(self, expression: str, token: str | None = None, reason: str | None = None) -> None:
        self.expression = expression
        self.token = token
        msg = f"Invalid input string {expression!r}, please check the correct syntax"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class RangeOrderError(CronexpError, ValueError):
    """Raised when an interval starts after it ends."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid interval '{start}-{end}', start is greater than end")


class OutOfRangeError(CronexpError, ValueError):
    """Raised when an expanded field contains values outside of its allowed range."""

    def __init__(self, allowed: AllowedRange, field: FieldEnum | None = None) -> None:
        self.allowed = allowed
        self.field = field
        name = str(field).capitalize() if field is not None else "Field"
        super().__init__(f"{name} value is not in the allowed interval [{allowed.min}, {allowed.max}]")


class CronexpConfigError(CronexpError, ValueError):
    """Raised when a configuration value cannot be applied."""
