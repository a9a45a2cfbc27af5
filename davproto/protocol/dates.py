"""
Parsing of the date strings found in DAV:creationdate and
DAV:getlastmodified.

Servers are not very consistent here - RFC 4918 says creationdate is
RFC 3339 and getlastmodified is RFC 1123, but in the wild we see ISO
dates with and without fractions, numeric offsets, RFC 850 dates and
plain asctime output.  The formats below are tried in order, and the
first one matching the complete string wins.

If nothing matches, parse_date() returns None rather than raising.  A
single odd date should not make a whole multistatus response unusable,
but it does mean that the caller can't tell a missing date from an
unparseable one.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

from davproto.lib.python_utilities import to_normal_str

GMT = timezone.utc

## Server dates always use english names, no matter what the locale of
## the client is, so we don't use strptime's %a/%b here.
MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
DAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_MONTHS = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    _MONTHS[_name] = _number
    _MONTHS[_name[:3]] = _number
_DAYS = set(DAY_NAMES) | {name[:3] for name in DAY_NAMES}

## Offsets in minutes.  Of the ambiguous abbreviations, CST is US
## Central, IST is India and BST is British Summer Time.
_ZONES = {
    "GMT": 0,
    "UT": 0,
    "UTC": 0,
    "Z": 0,
    ## North America
    "AST": -4 * 60,
    "ADT": -3 * 60,
    "EST": -5 * 60,
    "EDT": -4 * 60,
    "CST": -6 * 60,
    "CDT": -5 * 60,
    "MST": -7 * 60,
    "MDT": -6 * 60,
    "PST": -8 * 60,
    "PDT": -7 * 60,
    "AKST": -9 * 60,
    "AKDT": -8 * 60,
    "HST": -10 * 60,
    "NST": -3 * 60 - 30,
    "NDT": -2 * 60 - 30,
    ## Europe
    "WET": 0,
    "WEST": 60,
    "BST": 60,
    "CET": 60,
    "CEST": 2 * 60,
    "MET": 60,
    "MEST": 2 * 60,
    "EET": 2 * 60,
    "EEST": 3 * 60,
    "MSK": 3 * 60,
    ## Asia
    "IST": 5 * 60 + 30,
    "PKT": 5 * 60,
    "ICT": 7 * 60,
    "WIB": 7 * 60,
    "HKT": 8 * 60,
    "SGT": 8 * 60,
    "PHT": 8 * 60,
    "JST": 9 * 60,
    "KST": 9 * 60,
    ## Australia and New Zealand
    "AWST": 8 * 60,
    "ACST": 9 * 60 + 30,
    "ACDT": 10 * 60 + 30,
    "AEST": 10 * 60,
    "AEDT": 11 * 60,
    "NZST": 12 * 60,
    "NZDT": 13 * 60,
}
_NUMERIC_ZONE = re.compile(
    r"(?:GMT|UTC|UT)?(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?",
    re.IGNORECASE | re.ASCII,
)

_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"
_ISO_DATE = r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
_WEEKDAY = r"(?P<weekday>[a-z]+)"
_MONTH_NAME = r"(?P<monthname>[a-z]+)"
_ZONE_NAME = r"(?P<zone>[a-z]+(?:[+-]\d{1,2}(?::?\d{2})?)?|[+-]\d{4})"


def _zone_offset(text: str) -> Optional[tzinfo]:
    name = text.upper()
    if name in _ZONES:
        return timezone(timedelta(minutes=_ZONES[name]))
    match = _NUMERIC_ZONE.fullmatch(text)
    if not match:
        return None
    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if hours > 23 or minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    if match.group("sign") == "-":
        offset = -offset
    return timezone(offset)


def _expand_year(year: str) -> int:
    """
    Two-digit years are put within 80 years before and 20 years after
    the current year.
    """
    if len(year) != 2:
        return int(year)
    start = datetime.now(GMT).year - 80
    expanded = start // 100 * 100 + int(year)
    if expanded < start:
        expanded += 100
    return expanded


@dataclass(frozen=True)
class DateFormat:
    """
    One known server date format.

    Attributes:
        pattern: The format, written the way servers document them
        regex: Regular expression matching the complete date string
        default_tz: Timezone to use when the format carries none
    """

    pattern: str
    regex: "re.Pattern[str]"
    default_tz: tzinfo = GMT

    def parse(self, text: str) -> Optional[datetime]:
        match = self.regex.fullmatch(text)
        if not match:
            return None
        fields = match.groupdict()

        if fields.get("weekday") is not None:
            ## the day name has to be a real one, but it's not checked
            ## against the date itself
            if fields["weekday"].lower() not in _DAYS:
                return None

        if fields.get("monthname") is not None:
            month = _MONTHS.get(fields["monthname"].lower())
            if month is None:
                return None
        else:
            month = int(fields["month"])

        tz = self.default_tz
        if fields.get("zone") is not None:
            tz = _zone_offset(fields["zone"])
            if tz is None:
                return None

        microsecond = 0
        if fields.get("fraction") is not None:
            microsecond = int(fields["fraction"][:6].ljust(6, "0"))

        try:
            parsed = datetime(
                _expand_year(fields["year"]),
                month,
                int(fields["day"]),
                int(fields["hour"]),
                int(fields["minute"]),
                int(fields["second"]),
                microsecond,
                tzinfo=tz,
            )
        except ValueError:
            return None
        return parsed.astimezone(GMT)


def _format(pattern: str, regex: str) -> DateFormat:
    return DateFormat(pattern, re.compile(regex, re.IGNORECASE | re.ASCII))


## The order matters, the first match wins.
DATE_FORMATS = (
    _format("yyyy-MM-dd'T'HH:mm:ss'Z'", _ISO_DATE + "T" + _TIME + "Z"),
    _format(
        "EEE, dd MMM yyyy HH:mm:ss zzz",
        _WEEKDAY
        + r",\s*(?P<day>\d{1,2}) "
        + _MONTH_NAME
        + r" (?P<year>\d{4}) "
        + _TIME
        + " "
        + _ZONE_NAME,
    ),
    _format(
        "yyyy-MM-dd'T'HH:mm:ss.sss'Z'",
        _ISO_DATE + "T" + _TIME + r"\.(?P<fraction>\d+)Z",
    ),
    _format(
        "yyyy-MM-dd'T'HH:mm:ssZ",
        _ISO_DATE + "T" + _TIME + r"(?P<zone>[+-]\d{2}:?\d{2})",
    ),
    _format(
        "EEE MMM dd HH:mm:ss zzz yyyy",
        _WEEKDAY
        + " "
        + _MONTH_NAME
        + r" +(?P<day>\d{1,2}) "
        + _TIME
        + " "
        + _ZONE_NAME
        + r" (?P<year>\d{4})",
    ),
    _format(
        "EEEEEE, dd-MMM-yy HH:mm:ss zzz",
        _WEEKDAY
        + r",\s*(?P<day>\d{1,2})-"
        + _MONTH_NAME
        + r"-(?P<year>\d{2}|\d{4}) "
        + _TIME
        + " "
        + _ZONE_NAME,
    ),
    _format(
        "EEE MMMM d HH:mm:ss yyyy",
        _WEEKDAY + " " + _MONTH_NAME + r" +(?P<day>\d{1,2}) " + _TIME + r" (?P<year>\d{4})",
    ),
)


def parse_date(value: Union[str, bytes, None]) -> Optional[datetime]:
    """
    Parse a date sent by a WebDAV server.

    Args:
        value: The date string, or None

    Returns:
        A timezone-aware datetime in UTC, or None if value is None or
        does not match any of the known formats.
    """
    if value is None:
        return None
    text = to_normal_str(value).strip()
    for date_format in DATE_FORMATS:
        parsed = date_format.parse(text)
        if parsed is not None:
            return parsed
    return None
