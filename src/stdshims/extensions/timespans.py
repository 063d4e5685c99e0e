"""Compact ``timedelta`` rendering: ``[-][D.][H:][M:]S[.fff]``.

Each unit is printed only when it or a larger unit is non-zero. Once a
larger unit has been printed, the smaller ones are zero-padded to two
digits, so a non-zero day count always yields ``HH:MM:SS``.

Examples:
    >>> from datetime import timedelta
    >>> to_short_string(timedelta(0))
    '0'
    >>> to_short_string(timedelta(seconds=90))
    '1:30'
    >>> to_short_string(timedelta(days=1, minutes=2))
    '1.00:02:00'
"""

from __future__ import annotations

import re
from datetime import timedelta

from stdshims.errors import require_not_none

_SHORT_PATTERN = re.compile(
    r"^(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.(?=\d{2}:\d{2}:\d{2}))?"
    r"(?:(?P<hours>\d+):(?=\d{2}:\d{2}))?"
    r"(?:(?P<minutes>\d+):(?=\d{2}(?:\.|$)))?"
    r"(?P<seconds>\d+)"
    r"(?:\.(?P<ms>\d{3}))?$"
)


def to_short_string(span: timedelta) -> str:
    """Render *span* in the compact ``[-][D.][H:][M:]S[.fff]`` form.

    Sub-millisecond precision is truncated. Milliseconds are shown only
    when non-zero.
    """
    require_not_none(span, "span")
    negative = span < timedelta(0)
    span = -span if negative else span

    total_ms = span // timedelta(milliseconds=1)
    total_seconds, ms = divmod(total_ms, 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    total_hours, minutes = divmod(total_minutes, 60)
    days, hours = divmod(total_hours, 24)

    parts: list[str] = []
    if days:
        parts.append(f"{days}.{hours:02d}:{minutes:02d}:{seconds:02d}")
    elif hours:
        parts.append(f"{hours}:{minutes:02d}:{seconds:02d}")
    elif minutes:
        parts.append(f"{minutes}:{seconds:02d}")
    else:
        parts.append(str(seconds))

    if ms:
        parts.append(f".{ms:03d}")

    text = "".join(parts)
    return f"-{text}" if negative and text != "0" else text


def from_short_string(text: str) -> timedelta:
    """Parse the output of :func:`to_short_string` back into a ``timedelta``.

    Raises:
        ValueError: *text* does not follow the compact format.
    """
    match = _SHORT_PATTERN.match(require_not_none(text, "text").strip())
    if match is None:
        raise ValueError(f"Not a short time span: {text!r}")

    def unit(name: str) -> int:
        value = match.group(name)
        return int(value) if value else 0

    present = [name for name in ("days", "hours", "minutes") if match.group(name)]
    limits = {"hours": 24, "minutes": 60, "seconds": 60}
    for name, limit in limits.items():
        if present and present[0] != name and unit(name) >= limit:
            raise ValueError(f"Not a short time span: {text!r} ({name} out of range)")
    if present and unit(present[0]) == 0:
        raise ValueError(f"Not a short time span: {text!r} (leading {present[0]} is zero)")

    span = timedelta(
        days=unit("days"),
        hours=unit("hours"),
        minutes=unit("minutes"),
        seconds=unit("seconds"),
        milliseconds=unit("ms"),
    )
    return -span if match.group("sign") else span
