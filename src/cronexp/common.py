"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

__all__ = [
    "ALLOWED_RANGES",
    "DAY_NAME_TO_INDEX",
    "EXPECTED_FIELD_COUNT",
    "FIELD_SEPARATOR",
    "MONTH_NAME_TO_INDEX",
    "AllowedRange",
    "FieldEnum",
]

import sys
from types import MappingProxyType
from typing import Final, NamedTuple

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum

EXPECTED_FIELD_COUNT: Final[int] = 6
FIELD_SEPARATOR: Final[str] = " "


class FieldEnum(StrEnum):
    """Enum of the temporal fields of a cron expression, valued by their display label."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day of month"
    MONTH = "month"
    DAY_OF_WEEK = "day of week"


class AllowedRange(NamedTuple):
    """Inclusive bounds of the values a field may take."""

    min: int
    max: int

    def values(self) -> tuple[int, ...]:
        """Return every integer between the bounds, both included."""
        return tuple(range(self.min, self.max + 1))

    def contains(self, value: int) -> bool:
        """Return ``True`` when *value* lies within the bounds."""
        return self.min <= value <= self.max


ALLOWED_RANGES: Final = MappingProxyType(
    {
        FieldEnum.MINUTE: AllowedRange(0, 59),
        FieldEnum.HOUR: AllowedRange(0, 23),
        FieldEnum.DAY_OF_MONTH: AllowedRange(1, 31),
        FieldEnum.MONTH: AllowedRange(1, 12),
        FieldEnum.DAY_OF_WEEK: AllowedRange(0, 6),
    }
)

DAY_NAME_TO_INDEX: Final = MappingProxyType(
    {"SUN": 0, "MON": 1, "TUE": 2, "WED": 3, "THU": 4, "FRI": 5, "SAT": 6}
)
MONTH_NAME_TO_INDEX: Final = MappingProxyType(
    {
        "JAN": 1,
        "FEB": 2,
        "MAR": 3,
        "APR": 4,
        "MAY": 5,
        "JUN": 6,
        "JUL": 7,
        "AUG": 8,
        "SEP": 9,
        "OCT": 10,
        "NOV": 11,
        "DEC": 12,
    }
)
