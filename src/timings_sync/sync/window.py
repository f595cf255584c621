"""Date window bounding a sync run."""

import logging
import re
from datetime import date

import pendulum
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_KEYWORDS = {
    "today": 0,
    "now": 0,
    "midnight": 0,
    "yesterday": -1,
    "tomorrow": 1,
}
_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_UNIT = r"(day|week|month|year)s?"

_AGO = re.compile(rf"^(\d+) {_UNIT} ago$")
_OFFSET = re.compile(rf"^([+-]) ?(\d+) {_UNIT}$")
_RELATIVE_UNIT = re.compile(r"^(last|next|this) (day|week|month|year)$")
_WEEKDAY = re.compile(rf"^(?:(last|next|this) )?({'|'.join(_WEEKDAYS)})$")
_BOUNDARY = re.compile(r"^(first|last) day of (last|next|this) (month|year)$")

_DIRECTION = {"last": -1, "this": 0, "next": 1}


def _shift(day: pendulum.Date, unit: str, amount: int) -> pendulum.Date:
    return day.add(**{f"{unit}s": amount})


def _weekday(day: pendulum.Date, modifier: str | None, name: str) -> pendulum.Date:
    weekday = pendulum.WeekDay(_WEEKDAYS.index(name))
    if modifier == "last":
        return day.previous(weekday)
    if modifier == "next":
        return day.next(weekday)
    # Bare or "this": today if it matches, else the coming one
    if day.weekday() == weekday:
        return day
    return day.next(weekday)


def _parse_relative(text: str, day: pendulum.Date) -> pendulum.Date | None:
    if text in _KEYWORDS:
        return day.add(days=_KEYWORDS[text])

    match = _AGO.match(text)
    if match:
        return _shift(day, match.group(2), -int(match.group(1)))

    match = _OFFSET.match(text)
    if match:
        amount = int(match.group(2))
        return _shift(day, match.group(3), amount if match.group(1) == "+" else -amount)

    match = _RELATIVE_UNIT.match(text)
    if match:
        return _shift(day, match.group(2), _DIRECTION[match.group(1)])

    match = _WEEKDAY.match(text)
    if match:
        return _weekday(day, match.group(1), match.group(2))

    match = _BOUNDARY.match(text)
    if match:
        edge, direction, unit = match.groups()
        shifted = _shift(day, unit, _DIRECTION[direction])
        return shifted.start_of(unit) if edge == "first" else shifted.end_of(unit)

    return None


def parse_date_expression(value: str, today: date | None = None) -> date:
    """Parse a date given as YYYY-MM-DD or as a relative expression.

    Relative expressions follow the usual English forms: ``yesterday``,
    ``3 days ago``, ``-1 week``, ``last month``, ``last monday``,
    ``next friday`` or ``first day of last month``.

    Args:
        value: Expression to parse.
        today: Reference day for relative expressions. Defaults to today.

    Returns:
        Parsed date.

    Raises:
        ValueError: If the expression is not understood.
    """
    base = pendulum.today().date() if today is None else pendulum.date(today.year, today.month, today.day)
    text = " ".join(value.lower().split())

    parsed = _parse_relative(text, base)
    if parsed is None:
        try:
            parsed = pendulum.from_format(text, "YYYY-MM-DD").date()
        except ValueError:
            raise ValueError(
                f"Invalid date '{value}'. Use YYYY-MM-DD or e.g. 'yesterday', '1 week ago'"
            ) from None

    return date(parsed.year, parsed.month, parsed.day)


class RunWindow(BaseModel):
    """Inclusive range of days whose time entries are synced."""

    model_config = ConfigDict(frozen=True)

    since: date
    until: date

    @classmethod
    def from_expressions(
        cls,
        since: str | None = "yesterday",
        until: str | None = "today",
        today: date | None = None,
    ) -> "RunWindow":
        """Build a window from command-line style expressions.

        ``since`` later than ``until`` is accepted as-is and only logged.
        """
        window = cls(
            since=parse_date_expression(since or "yesterday", today),
            until=parse_date_expression(until or "today", today),
        )
        if window.since > window.until:
            logger.warning(f"Sync window starts after it ends: {window}")
        return window

    def __str__(self) -> str:
        return f"{self.since.isoformat()} to {self.until.isoformat()}"
