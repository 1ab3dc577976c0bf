"""HTTP-date grammars from RFC 7231 Section 7.1.1.1.

Three historical formats are accepted on input, tried in a fixed order:
- rfc1123: ``Sun, 06 Nov 1994 08:49:37 GMT`` (IMF-fixdate, senders MUST use it)
- rfc850:  ``Sunday, 06-Nov-94 08:49:37 GMT`` (obsolete)
- asctime: ``Sun Nov  6 08:49:37 1994`` (ANSI C)

Only rfc1123 is ever produced on output.

INVARIANT: Every parsed instant is an aware datetime in UTC.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime

DEFAULT_CENTURY_PIVOT = 70

WEEKDAY_ABBREVS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_ABBREVS: tuple[str, ...] = (
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

_WKDAY = "|".join(WEEKDAY_ABBREVS)
_WEEKDAY = "|".join(WEEKDAY_NAMES)
_MONTH = "|".join(MONTH_ABBREVS)
_TIME = r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"

RFC1123_PATTERN = re.compile(
    rf"(?P<weekday>{_WKDAY}), (?P<day>[0-9]{{2}}) (?P<month>{_MONTH}) "
    rf"(?P<year>[0-9]{{4}}) {_TIME} GMT"
)
RFC850_PATTERN = re.compile(
    rf"(?P<weekday>{_WEEKDAY}), (?P<day>[0-9]{{2}})-(?P<month>{_MONTH})-"
    rf"(?P<year>[0-9]{{2}}) {_TIME} GMT"
)
ASCTIME_PATTERN = re.compile(
    rf"(?P<weekday>{_WKDAY}) (?P<month>{_MONTH}) (?P<day>[0-9]{{2}}| [0-9]) "
    rf"{_TIME} (?P<year>[0-9]{{4}})"
)


class HttpDateError(ValueError):
    """Raised when text matches none of the accepted HTTP-date grammars."""


def expand_two_digit_year(year: int, pivot: int = DEFAULT_CENTURY_PIVOT) -> int:
    """Map a two-digit year onto a full year.

    Years below *pivot* land in the 2000s, the rest in the 1900s. With the
    default pivot of 70 the window is 1970-2069.
    """
    return 2000 + year if year < pivot else 1900 + year


def _build(match: re.Match[str], year: int, weekdays: tuple[str, ...]) -> datetime:
    """Turn the named groups of *match* into a UTC datetime.

    Raises ValueError for impossible calendar or clock fields, or when the
    weekday disagrees with the date.
    """
    instant = datetime(
        year,
        MONTH_ABBREVS.index(match["month"]) + 1,
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        tzinfo=UTC,
    )
    if weekdays[instant.weekday()] != match["weekday"]:
        msg = f"weekday {match['weekday']!r} does not fall on {instant.date()}"
        raise ValueError(msg)
    return instant


def _parse_rfc1123(text: str, pivot: int) -> datetime | None:
    match = RFC1123_PATTERN.fullmatch(text)
    if match is None:
        return None
    return _build(match, int(match["year"]), WEEKDAY_ABBREVS)


def _parse_rfc850(text: str, pivot: int) -> datetime | None:
    match = RFC850_PATTERN.fullmatch(text)
    if match is None:
        return None
    year = expand_two_digit_year(int(match["year"]), pivot)
    return _build(match, year, WEEKDAY_NAMES)


def _parse_asctime(text: str, pivot: int) -> datetime | None:
    match = ASCTIME_PATTERN.fullmatch(text)
    if match is None:
        return None
    return _build(match, int(match["year"]), WEEKDAY_ABBREVS)


# Priority order: first entry that matches wins.
HTTP_DATE_FORMATS: tuple[tuple[str, Callable[[str, int], datetime | None]], ...] = (
    ("rfc1123", _parse_rfc1123),
    ("rfc850", _parse_rfc850),
    ("asctime", _parse_asctime),
)


def match_http_date(
    text: str, *, century_pivot: int = DEFAULT_CENTURY_PIVOT
) -> tuple[str, datetime]:
    """Return ``(format_name, instant)`` for the first grammar matching *text*.

    A grammar that matches structurally but names an impossible date does not
    fall through to the next grammar; the three are disjoint, so no other
    could match either.

    Raises:
        HttpDateError: No grammar matches the whole of *text*.
    """
    for name, parse in HTTP_DATE_FORMATS:
        try:
            instant = parse(text, century_pivot)
        except ValueError as exc:
            msg = f"invalid {name} date {text!r}: {exc}"
            raise HttpDateError(msg) from exc
        if instant is not None:
            return name, instant
    msg = f"not an HTTP-date: {text!r}"
    raise HttpDateError(msg)


def parse_http_date(text: str, *, century_pivot: int = DEFAULT_CENTURY_PIVOT) -> datetime:
    """Parse *text* as an HTTP-date and return an aware UTC datetime."""
    return match_http_date(text, century_pivot=century_pivot)[1]


def format_http_date(instant: datetime) -> str:
    """Format *instant* as an RFC 1123 HTTP-date.

    Aware datetimes are converted to UTC first; sub-second precision is
    dropped. Naive datetimes are taken to be UTC already.
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(UTC)
    return (
        f"{WEEKDAY_ABBREVS[instant.weekday()]}, {instant.day:02d} "
        f"{MONTH_ABBREVS[instant.month - 1]} {instant.year:04d} "
        f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d} GMT"
    )
