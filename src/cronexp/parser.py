"""Turn a cron expression into the explicit values of each of its fields."""

from __future__ import annotations

__all__ = ["CronExpression", "CronResult", "parse_cron"]

from functools import cached_property
from typing import NamedTuple

from cronexp.common import ALLOWED_RANGES, FieldEnum
from cronexp.errors import CronexpError
from cronexp.expander import expand
from cronexp.logging import WithLogger
from cronexp.tokenizer import FieldSet, tokenize


class CronResult(NamedTuple):
    """Expanded values of the five temporal fields plus the command to run."""

    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    @property
    def dom(self) -> tuple[int, ...]:
        """Alias for ``day_of_month`` property."""
        return self.day_of_month

    @property
    def dow(self) -> tuple[int, ...]:
        """Alias for ``day_of_week`` property."""
        return self.day_of_week


class CronExpression(WithLogger):
    """Lazily expand the fields of a single cron expression.

    Every accessor computes its value once and keeps it, so asking twice returns the same
    object. A failing accessor raises every time it is asked and never caches anything.

    :param expression: Raw cron line with six fields separated by a single space.
    """

    def __init__(self, expression: str) -> None:
        self._expression = expression

    @property
    def expression(self) -> str:
        """Return the raw expression this object was built from."""
        return self._expression

    @cached_property
    def fields(self) -> FieldSet:
        """Return the tokenized fields of the expression."""
        try:
            fields = tokenize(self._expression)
        except CronexpError as exc:
            self._logger.debug("Failed to tokenize %r: %s", self._expression, exc)
            raise
        self._logger.debug("Tokenized %r into %r", self._expression, fields)
        return fields

    @cached_property
    def minutes(self) -> tuple[int, ...]:
        """Return the minutes the expression runs at."""
        return self._expand(FieldEnum.MINUTE, self.fields.minute)

    @cached_property
    def hours(self) -> tuple[int, ...]:
        """Return the hours the expression runs at."""
        return self._expand(FieldEnum.HOUR, self.fields.hour)

    @cached_property
    def days_of_the_month(self) -> tuple[int, ...]:
        """Return the days of the month the expression runs on."""
        return self._expand(FieldEnum.DAY_OF_MONTH, self.fields.day_of_month)

    @cached_property
    def months(self) -> tuple[int, ...]:
        """Return the months the expression runs in."""
        return self._expand(FieldEnum.MONTH, self.fields.month)

    @cached_property
    def days_of_the_week(self) -> tuple[int, ...]:
        """Return the days of the week the expression runs on, Sunday being ``0``."""
        return self._expand(FieldEnum.DAY_OF_WEEK, self.fields.day_of_week)

    @property
    def command(self) -> str:
        """Return the command exactly as written in the expression."""
        return self.fields.command

    def results(self) -> CronResult:
        """Return every expanded field at once.

        :raises CronexpError: The error of the first field that cannot be expanded.
        """
        return self._results

    @cached_property
    def _results(self) -> CronResult:
        return CronResult(
            minute=self.minutes,
            hour=self.hours,
            day_of_month=self.days_of_the_month,
            month=self.months,
            day_of_week=self.days_of_the_week,
            command=self.command,
        )

    def _expand(self, kind: FieldEnum, value: str) -> tuple[int, ...]:
        try:
            result = expand(value, ALLOWED_RANGES[kind], kind)
        except CronexpError as exc:
            self._logger.debug("Failed to expand %s field %r: %s", kind, value, exc)
            raise
        self._logger.debug("Expanded %s field %r into %d values", kind, value, len(result))
        return result


def parse_cron(expression: str) -> CronResult:
    """Parse a cron expression into explicit field values.

    :param expression: Raw cron line, e.g. ``"*/15 0 1,15 * 1-5 /usr/bin/find"``.
    :returns: A :class:`CronResult` with sorted integer values per field.
    :raises CronexpError: If the expression is malformed or holds out-of-range values.
    """
    return CronExpression(expression).results()
