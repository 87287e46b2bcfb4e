"""Period resolution for bucketed views.

Turns a :class:`PeriodSelector` into an inclusive date range and the ordered
slots that the aggregator fills. All arithmetic works on calendar dates
(``datetime.date`` and :func:`calendar.monthrange`); nothing here looks at a
clock or a timezone.

Slot keys are produced by applying the mode's key function to each slot's
start date, so a transaction date and the slot it belongs to can never map to
different keys.
"""

from calendar import monthrange
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable, Optional

from bukukas.domain.entities import DateRange, PeriodSelector, PeriodSlot, ViewMode
from bukukas.domain.errors import InvalidPeriod, invalid_month, invalid_year

# Fixed so that keys never depend on the process locale (calendar.month_abbr does).
MONTH_NAMES: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

KeyFn = Callable[[date], str]


def day_key(value: date) -> str:
    """Zero-padded day of month, e.g. "05"."""
    return f"{value.day:02d}"


def month_key(value: date) -> str:
    """Month name, e.g. "Mar"."""
    return MONTH_NAMES[value.month - 1]


def year_key(value: date) -> str:
    """Four-digit year, e.g. "2024"."""
    return f"{value.year:04d}"


_KEY_FUNCTIONS: dict[ViewMode, KeyFn] = {
    ViewMode.DAY: day_key,
    ViewMode.MONTH: month_key,
    ViewMode.YEAR: year_key,
}


def bucket_key_fn(mode: ViewMode) -> KeyFn:
    """Return the date -> bucket key function for a view mode."""
    try:
        return _KEY_FUNCTIONS[mode]
    except KeyError:
        raise InvalidPeriod(f"Unknown view mode {mode!r}") from None


def bucket_key(mode: ViewMode, value: date) -> str:
    """Bucket key of a date under a view mode."""
    return bucket_key_fn(mode)(value)


@dataclass(frozen=True)
class ResolvedPeriod:
    """Inclusive range and ordered slots for a selector."""

    mode: ViewMode
    date_range: DateRange
    slots: tuple[PeriodSlot, ...]

    @property
    def range_start(self) -> date:
        return self.date_range.start

    @property
    def range_end(self) -> date:
        return self.date_range.end

    @property
    def bucket_keys(self) -> tuple[str, ...]:
        return tuple(slot.key for slot in self.slots)

    @property
    def key_fn(self) -> KeyFn:
        return bucket_key_fn(self.mode)

    def key_for(self, value: date) -> str:
        """Bucket key of a date in this period's mode."""
        return self.key_fn(value)


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    return monthrange(year, month)[1]


def month_range(year: int, month: int) -> DateRange:
    """Inclusive range of a calendar month."""
    return DateRange(date(year, month, 1), date(year, month, last_day_of_month(year, month)))


def year_range(year: int) -> DateRange:
    """Inclusive range of a calendar year."""
    return DateRange(date(year, 1, 1), date(year, 12, 31))


def _check_month(month: Optional[int]) -> int:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidPeriod(invalid_month(month))
    return month


def _check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidPeriod(invalid_year(year))
    return year


def validate_selector(selector: PeriodSelector) -> None:
    """Reject a selector that cannot be resolved.

    Raises:
        InvalidPeriod: If the mode, month, year or year window is out of range
    """
    if not isinstance(selector.mode, ViewMode):
        raise InvalidPeriod(f"Unknown view mode {selector.mode!r}")

    _check_year(selector.year)

    if selector.mode is ViewMode.DAY:
        if selector.month is None:
            raise InvalidPeriod("Month is required for day view")
        _check_month(selector.month)
    elif selector.month is not None:
        _check_month(selector.month)

    if selector.mode is ViewMode.YEAR:
        for name in ("years_before", "years_after"):
            value = getattr(selector, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidPeriod(f"{name} must be a non-negative integer, got {value!r}")
        first = selector.year - selector.years_before
        last = selector.year + selector.years_after
        if first < MINYEAR or last > MAXYEAR:
            raise InvalidPeriod(
                f"Year window {first}..{last} is outside {MINYEAR}..{MAXYEAR}"
            )


def _day_slots(year: int, month: int) -> tuple[PeriodSlot, ...]:
    slots = []
    for day in range(1, last_day_of_month(year, month) + 1):
        current = date(year, month, day)
        slots.append(PeriodSlot(key=day_key(current), start=current, end=current))
    return tuple(slots)


def _month_slots(year: int) -> tuple[PeriodSlot, ...]:
    slots = []
    for month in range(1, 13):
        bounds = month_range(year, month)
        slots.append(PeriodSlot(key=month_key(bounds.start), start=bounds.start, end=bounds.end))
    return tuple(slots)


def _year_slots(first: int, last: int) -> tuple[PeriodSlot, ...]:
    slots = []
    for year in range(first, last + 1):
        bounds = year_range(year)
        slots.append(PeriodSlot(key=year_key(bounds.start), start=bounds.start, end=bounds.end))
    return tuple(slots)


def resolve_period(selector: PeriodSelector) -> ResolvedPeriod:
    """Compute the inclusive range and ordered bucket slots of a selector.

    Args:
        selector: View mode and anchor

    Returns:
        ResolvedPeriod whose slots cover the range without gaps, in
        chronological order

    Raises:
        InvalidPeriod: If the selector is out of range
    """
    validate_selector(selector)

    if selector.mode is ViewMode.DAY:
        date_range = month_range(selector.year, selector.month)
        slots = _day_slots(selector.year, selector.month)
    elif selector.mode is ViewMode.MONTH:
        date_range = year_range(selector.year)
        slots = _month_slots(selector.year)
    else:
        first = selector.year - selector.years_before
        last = selector.year + selector.years_after
        date_range = DateRange(year_range(first).start, year_range(last).end)
        slots = _year_slots(first, last)

    return ResolvedPeriod(mode=selector.mode, date_range=date_range, slots=slots)


def describe_period(resolved: ResolvedPeriod) -> str:
    """Short human label for a resolved period, e.g. "Mar 2024"."""
    start, end = resolved.range_start, resolved.range_end
    if resolved.mode is ViewMode.DAY:
        return f"{month_key(start)} {start.year}"
    if resolved.mode is ViewMode.MONTH:
        return str(start.year)
    return f"{start.year}-{end.year}"
