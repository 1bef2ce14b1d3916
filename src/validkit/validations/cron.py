"""
Five-field cron expression parser.

Fields: minute, hour, day-of-month, month, day-of-week. Each field accepts
`*`, numbers, `a-b` ranges, `/n` steps and comma-separated lists. Months and
weekdays also accept three-letter names (JAN..DEC, SUN..SAT), and the two day
fields accept `?` as an alias for `*`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

_MONTHS = {name: i for i, name in enumerate(
    ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"], start=1
)}
_WEEKDAYS = {name: i for i, name in enumerate(["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"])}


@dataclass(frozen=True)
class _Field:
    name: str
    low: int
    high: int
    names: Dict[str, int]
    allow_question: bool = False


_FIELDS: Tuple[_Field, ...] = (
    _Field("minute", 0, 59, {}),
    _Field("hour", 0, 23, {}),
    _Field("day_of_month", 1, 31, {}, allow_question=True),
    _Field("month", 1, 12, _MONTHS),
    _Field("day_of_week", 0, 6, _WEEKDAYS, allow_question=True),
)


@dataclass(frozen=True)
class CronSchedule:
    """Expanded set of matching values for each field."""
    minute: FrozenSet[int]
    hour: FrozenSet[int]
    day_of_month: FrozenSet[int]
    month: FrozenSet[int]
    day_of_week: FrozenSet[int]


def _value(token: str, field: _Field) -> int:
    upper = token.upper()
    if upper in field.names:
        return field.names[upper]
    if not token.isdigit():
        raise ValueError(f"{field.name}: not a number: {token!r}")
    return int(token)


def _parse_range(expr: str, field: _Field) -> Tuple[int, int, int]:
    """Return (start, end, step) for one comma-separated element."""
    base, _, step_s = expr.partition("/")
    step = 1
    if step_s or expr.endswith("/"):
        if not step_s.isdigit() or int(step_s) == 0:
            raise ValueError(f"{field.name}: bad step: {expr!r}")
        step = int(step_s)

    # "?" is limited to the two day fields, unlike parsers that treat it as "*" anywhere.
    if base == "*" or (base == "?" and field.allow_question):
        start, end = field.low, field.high
    else:
        lo_s, dash, hi_s = base.partition("-")
        start = _value(lo_s, field)
        if dash:
            end = _value(hi_s, field)
        elif step_s:
            # "5/15" runs from 5 to the top of the field.
            end = field.high
        else:
            end = start

    if start < field.low or end > field.high:
        raise ValueError(f"{field.name}: {expr!r} outside {field.low}-{field.high}")
    if start > end:
        raise ValueError(f"{field.name}: range start after end: {expr!r}")
    return start, end, step


def _parse_field(expr: str, field: _Field) -> FrozenSet[int]:
    values = set()
    for part in expr.split(","):
        if not part:
            raise ValueError(f"{field.name}: empty list element")
        start, end, step = _parse_range(part, field)
        values.update(range(start, end + 1, step))
    return frozenset(values)


def parse_cron(expr: str) -> CronSchedule:
    """
    Parse a standard five-field cron expression.

    Raises:
        ValueError: if the expression does not have five fields or any field is invalid.
    """
    parts = expr.split()
    if len(parts) != len(_FIELDS):
        raise ValueError(f"expected {len(_FIELDS)} fields, got {len(parts)}")
    parsed = {f.name: _parse_field(p, f) for p, f in zip(parts, _FIELDS)}
    return CronSchedule(**parsed)
