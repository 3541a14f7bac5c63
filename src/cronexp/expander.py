"""Expand a single cron field into the explicit integers it denotes.

A field is a comma-separated list of elements. Every element contributes values, the
union is sorted and deduplicated, and only then is it compared against the allowed range:
an out-of-range value rejects the whole field instead of being filtered out.
"""

from __future__ import annotations

__all__ = ["expand", "in_allowed_range"]

from collections.abc import Sequence
import re
from typing import TYPE_CHECKING, Final

from cronexp.errors import CronSyntaxError, OutOfRangeError, RangeOrderError

if TYPE_CHECKING:
    from cronexp.common import AllowedRange, FieldEnum

WILDCARD: Final[str] = "*"
_DIGITS: Final = re.compile(r"[0-9]+")
_PARTS: Final[int] = 2


def expand(field: str, allowed: AllowedRange, kind: FieldEnum | None = None) -> tuple[int, ...]:
    """Expand *field* into a sorted tuple of unique integers.

    Supported elements are ``N``, ``N-M``, ``*``, ``*/S``, ``N/S`` and ``N-M/S``. A bare ``*``
    anywhere in the list selects the whole allowed range and makes the other elements
    irrelevant. ``N/S`` walks from ``N`` up to ``allowed.max``, while ``N-M/S`` stops at ``M``.

    :param field: Raw field, already stripped of symbolic names.
    :param allowed: Inclusive bounds for the field.
    :param kind: Field kind reported in :class:`OutOfRangeError`.
    :returns: The expanded values in ascending order.
    :raises CronSyntaxError: If an element is malformed.
    :raises RangeOrderError: If an interval starts after it ends.
    :raises OutOfRangeError: If any value lies outside *allowed*.
    """
    values: set[int] = set()
    low, high = allowed.min, allowed.max
    for element in field.split(","):
        if element == WILDCARD:
            return allowed.values()
        expanded = _expand_element(element, field, allowed)
        low, high = min(low, expanded[0]), max(high, expanded[-1])
        # Out-of-range elements are only tracked by their bounds, the field is rejected below.
        if in_allowed_range(expanded, allowed):
            values.update(expanded)

    if not in_allowed_range((low, high), allowed):
        raise OutOfRangeError(allowed, kind)
    return tuple(sorted(values))


def in_allowed_range(values: Sequence[int], allowed: AllowedRange) -> bool:
    """Return ``True`` when the ascending *values* all lie within *allowed*.

    Only the first and last values are inspected, so *values* must be sorted.
    An empty sequence is never in range.
    """
    if not values:
        return False
    return allowed.contains(values[0]) and allowed.contains(values[-1])


def _expand_element(element: str, field: str, allowed: AllowedRange) -> range:
    if "/" in element:
        return _expand_step(element, field, allowed)
    if "-" in element:
        start, end = _parse_interval(element, field)
        return range(start, end + 1)
    value = _parse_int(element, field, element)
    return range(value, value + 1)


def _expand_step(element: str, field: str, allowed: AllowedRange) -> range:
    parts = element.split("/")
    if len(parts) != _PARTS:
        raise CronSyntaxError(field, element, "a step expression has exactly one '/'")
    base, step_expr = parts

    step = _parse_int(step_expr, field, element)
    if step == 0:
        raise CronSyntaxError(field, element, "step must be a positive integer")

    if base == WILDCARD:
        start, end = allowed.min, allowed.max
    elif "-" in base:
        start, end = _parse_interval(base, field)
    else:
        start, end = _parse_int(base, field, element), allowed.max
        # A start beyond the maximum is still emitted so the range check can report it.
        end = max(start, end)
    return range(start, end + 1, step)


def _parse_interval(interval: str, field: str) -> tuple[int, int]:
    parts = interval.split("-")
    if len(parts) != _PARTS:
        raise CronSyntaxError(field, interval, "an interval has exactly one '-'")
    start = _parse_int(parts[0], field, interval)
    end = _parse_int(parts[1], field, interval)
    if start > end:
        raise RangeOrderError(start, end)
    return start, end


def _parse_int(text: str, field: str, element: str) -> int:
    if _DIGITS.fullmatch(text) is None:
        raise CronSyntaxError(field, element, f"{text!r} is not an integer")
    return int(text)
