"""Timestamp parsing for feed dialects.

Each dialect owns exactly one grammar: Atom uses RFC 3339, RSS uses RFC 822.
There is no guessing across grammars, so ``01/02/2024``-style ambiguity can
never be silently misread.
"""

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

_RFC3339_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"
    r"[Tt ]"
    r"(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


class DateParseError(ValueError):
    """A timestamp string could not be parsed under the expected grammar."""


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 internet date-time, keeping its UTC offset.

    Raises:
        DateParseError: If the text is empty, malformed, or out of range.
    """
    if not text or not text.strip():
        raise DateParseError("empty timestamp")

    match = _RFC3339_RE.match(text.strip())
    if match is None:
        raise DateParseError(f"not an RFC 3339 timestamp: {text!r}")

    fields = match.groupdict()
    # Truncate to microsecond precision
    fraction = (fields["fraction"] or "0")[:6].ljust(6, "0")
    offset = "+00:00" if fields["offset"] in ("Z", "z") else fields["offset"]

    try:
        return datetime.fromisoformat(f"{fields['date']}T{fields['time']}.{fraction}{offset}")
    except ValueError as e:
        raise DateParseError(f"timestamp out of range: {text!r} ({e})") from e


def parse_rfc822(text: str) -> datetime:
    """Parse an RFC 822 / RFC 2822 date as used by RSS ``pubDate``.

    A ``-0000`` zone (unknown local time) is read as UTC.

    Raises:
        DateParseError: If the text is empty or not a valid RFC 822 date.
    """
    if not text or not text.strip():
        raise DateParseError("empty timestamp")

    try:
        parsed = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError, IndexError) as e:
        raise DateParseError(f"not an RFC 822 date: {text!r} ({e})") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
