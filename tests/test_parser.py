"""Unit tests for parsing whole cron expressions."""

from __future__ import annotations

import logging

import pytest

from cronexp.common import FieldEnum
from cronexp.errors import CronexpError, CronSyntaxError, FieldCountError, OutOfRangeError, RangeOrderError
from cronexp.parser import CronExpression, CronResult, parse_cron

EXAMPLE = "*/15 0 1,15 * 1-5 /usr/bin/find"


@pytest.mark.parametrize(
    (
        "expression",
        "expected_minute",
        "expected_hour",
        "expected_day_of_month",
        "expected_month",
        "expected_day_of_week",
    ),
    [
        pytest.param(
            "0 0 1 1 0 cmd",
            (0,),
            (0,),
            (1,),
            (1,),
            (0,),
            id="literals",
        ),
        pytest.param(
            "* * * * * cmd",
            tuple(range(60)),
            tuple(range(24)),
            tuple(range(1, 32)),
            tuple(range(1, 13)),
            tuple(range(7)),
            id="wildcards",
        ),
        pytest.param(
            "*/15 0-12/6 1,15 1-3 1-5/2 cmd",
            tuple(range(0, 60, 15)),
            (0, 6, 12),
            (1, 15),
            (1, 2, 3),
            (1, 3, 5),
            id="steps-and-ranges",
        ),
        pytest.param(
            "5,10-20/5 8,20 10-12 4,6-8 0,2-4 cmd",
            (5, 10, 15, 20),
            (8, 20),
            (10, 11, 12),
            (4, 6, 7, 8),
            (0, 2, 3, 4),
            id="mixed-list-and-ranges",
        ),
        pytest.param(
            "0 */8 */2 */3 * cmd",
            (0,),
            (0, 8, 16),
            tuple(range(1, 32, 2)),
            (1, 4, 7, 10),
            tuple(range(7)),
            id="stepped-month-and-day",
        ),
        pytest.param(
            "0 20/2 25/3 10/1 5/1 cmd",
            (0,),
            (20, 22),
            (25, 28, 31),
            (10, 11, 12),
            (5, 6),
            id="open-steps-stop-at-field-max",
        ),
        pytest.param(
            "0 6 10 JAN,FEB,MAR MON cmd",
            (0,),
            (6,),
            (10,),
            (1, 2, 3),
            (1,),
            id="name-lists",
        ),
        pytest.param(
            "0 9 15 APR-JUN/2 sun-wed cmd",
            (0,),
            (9,),
            (15,),
            (4, 6),
            (0, 1, 2, 3),
            id="name-ranges",
        ),
        pytest.param(
            "1,*,4 * 1-5,* *,JAN *,1-4 cmd",
            tuple(range(60)),
            tuple(range(24)),
            tuple(range(1, 32)),
            tuple(range(1, 13)),
            tuple(range(7)),
            id="wildcard-absorbs-list",
        ),
    ],
)
def test_parse_cron_valid(  # noqa: PLR0913
    expression: str,
    expected_minute: tuple[int, ...],
    expected_hour: tuple[int, ...],
    expected_day_of_month: tuple[int, ...],
    expected_month: tuple[int, ...],
    expected_day_of_week: tuple[int, ...],
) -> None:
    """Validate cron parsing across multiple expression complexities."""
    parsed = parse_cron(expression)

    assert parsed.minute == expected_minute
    assert parsed.hour == expected_hour
    assert parsed.day_of_month == expected_day_of_month
    assert parsed.month == expected_month
    assert parsed.day_of_week == expected_day_of_week
    assert parsed.command == "cmd"


def test_parse_cron_end_to_end() -> None:
    """The reference expression expands to the documented table."""
    assert parse_cron(EXAMPLE) == CronResult(
        minute=(0, 15, 30, 45),
        hour=(0,),
        day_of_month=(1, 15),
        month=tuple(range(1, 13)),
        day_of_week=(1, 2, 3, 4, 5),
        command="/usr/bin/find",
    )


def test_result_aliases() -> None:
    """dom and dow are shortcuts for the long field names."""
    result = parse_cron(EXAMPLE)
    assert result.dom == result.day_of_month
    assert result.dow == result.day_of_week


@pytest.mark.parametrize(
    ("expression", "error"),
    [
        pytest.param("0 0 1 1 0", FieldCountError, id="too-few-fields"),
        pytest.param("0 0 1 1 0 cmd extra", FieldCountError, id="too-many-fields"),
        pytest.param("0  0 1 1 0 cmd", FieldCountError, id="repeated-space"),
        pytest.param("0 24 * * * cmd", OutOfRangeError, id="hour-out-of-range"),
        pytest.param("0 -1 * * * cmd", CronSyntaxError, id="negative-hour"),
        pytest.param("0 0 32 * * cmd", OutOfRangeError, id="day-out-of-range"),
        pytest.param("0 0 1 13 * cmd", OutOfRangeError, id="month-out-of-range"),
        pytest.param("0 0 1 JANUARY * cmd", CronSyntaxError, id="invalid-month-name"),
        pytest.param("0 0 1 * MONDAY cmd", CronSyntaxError, id="invalid-dow-name"),
        pytest.param("*/0 * * * * cmd", CronSyntaxError, id="zero-step"),
        pytest.param("0 0 10-5 * * cmd", RangeOrderError, id="descending-range"),
        pytest.param("0-99999999999 * * * * cmd", OutOfRangeError, id="huge-minute-interval"),
        pytest.param("0 0-99999999999/1 * * * cmd", OutOfRangeError, id="huge-hour-step"),
    ],
)
def test_parse_cron_invalid(expression: str, error: type[CronexpError]) -> None:
    """Ensure malformed cron expressions are rejected with the matching error."""
    with pytest.raises(error):
        parse_cron(expression)


@pytest.mark.parametrize(
    ("expression", "kind"),
    [
        pytest.param("99 * * * * /usr/bin/find", FieldEnum.MINUTE, id="minutes"),
        pytest.param("* 99 * * * /usr/bin/find", FieldEnum.HOUR, id="hours"),
        pytest.param("* * 99 * * /usr/bin/find", FieldEnum.DAY_OF_MONTH, id="days-of-month"),
        pytest.param("* * * 99 * /usr/bin/find", FieldEnum.MONTH, id="months"),
        pytest.param("* * * * 99 /usr/bin/find", FieldEnum.DAY_OF_WEEK, id="days-of-week"),
    ],
)
def test_results_fail_for_each_field(expression: str, kind: FieldEnum) -> None:
    """results() must fail whichever field is out of range."""
    with pytest.raises(OutOfRangeError) as exc_info:
        CronExpression(expression).results()
    assert exc_info.value.field is kind


def test_accessors_fail_independently() -> None:
    """Every accessor reports its own out-of-range field."""
    expression = CronExpression("60 25 32 0 7 /bin/ls")
    for accessor in ("minutes", "hours", "days_of_the_month", "months", "days_of_the_week"):
        with pytest.raises(OutOfRangeError):
            getattr(expression, accessor)
    assert expression.command == "/bin/ls"


def test_accessors() -> None:
    """Per-field accessors expose the expanded values and the command."""
    expression = CronExpression(EXAMPLE)
    assert expression.expression == EXAMPLE
    assert expression.minutes == (0, 15, 30, 45)
    assert expression.hours == (0,)
    assert expression.days_of_the_month == (1, 15)
    assert expression.months == tuple(range(1, 13))
    assert expression.days_of_the_week == (1, 2, 3, 4, 5)
    assert expression.command == "/usr/bin/find"


def test_results_are_memoized() -> None:
    """Asking for results twice returns the very same object."""
    expression = CronExpression(EXAMPLE)
    first = expression.results()
    assert expression.results() is first
    assert expression.fields is expression.fields


def test_field_count_checked_before_expansion() -> None:
    """A wrong number of fields is reported even when the fields are also invalid."""
    with pytest.raises(FieldCountError):
        CronExpression("99 99 99 99 99").results()


def test_failures_are_not_cached() -> None:
    """A failing accessor raises on every access."""
    expression = CronExpression("* * * * 9 cmd")
    for _ in range(2):
        with pytest.raises(OutOfRangeError):
            expression.results()


def test_expansion_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Each expanded field is reported at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger=CronExpression.__name__):
        CronExpression(EXAMPLE).results()

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Tokenized") for message in messages)
    assert "Expanded minute field '*/15' into 4 values" in messages
    assert "Expanded day of week field '1-5' into 5 values" in messages
