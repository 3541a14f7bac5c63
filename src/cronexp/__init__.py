"""Public interface for the cronexp package."""

from __future__ import annotations

from .common import ALLOWED_RANGES, AllowedRange, FieldEnum
from .errors import (
    CronexpConfigError,
    CronexpError,
    CronSyntaxError,
    FieldCountError,
    OutOfRangeError,
    RangeOrderError,
)
from .expander import expand
from .parser import CronExpression, CronResult, parse_cron
from .tokenizer import FieldSet, tokenize

__all__ = [
    "ALLOWED_RANGES",
    "AllowedRange",
    "CronExpression",
    "CronResult",
    "CronSyntaxError",
    "CronexpConfigError",
    "CronexpError",
    "FieldCountError",
    "FieldEnum",
    "FieldSet",
    "OutOfRangeError",
    "RangeOrderError",
    "expand",
    "parse_cron",
    "tokenize",
]
