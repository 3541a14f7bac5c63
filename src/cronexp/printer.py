"""Render expanded cron expressions as a plain text table."""

from __future__ import annotations

__all__ = ["COMMAND_LABEL", "DEFAULT_COLUMN_WIDTH", "format_table"]

from typing import TYPE_CHECKING, Final

from cronexp.common import FieldEnum

if TYPE_CHECKING:
    from cronexp.parser import CronResult

DEFAULT_COLUMN_WIDTH: Final[int] = 14
COMMAND_LABEL: Final[str] = "command"


def format_table(result: CronResult, column_width: int = DEFAULT_COLUMN_WIDTH) -> str:
    """Return one line per field: the label padded to *column_width*, then its values.

    Labels longer than the column are truncated.
    """
    rows = [
        _row(str(field), " ".join(str(v) for v in values), column_width)
        for field, values in zip(FieldEnum, result[:-1])
    ]
    rows.append(_row(COMMAND_LABEL, result.command, column_width))
    return "\n".join(rows)


def _row(label: str, value: str, column_width: int) -> str:
    return f"{label[:column_width]:<{column_width}}{value}"
