"""String helpers: emptiness checks, edge trimming, and tolerant parsing."""

from __future__ import annotations

from collections.abc import Iterator

from stdshims.errors import require_not_none

SYSTEM_SYMBOLS = (" ", "\n", "\r")


def is_null_or_empty(text: str | None) -> bool:
    return not text


def is_null_or_whitespace(text: str | None) -> bool:
    return text is None or not text.strip()


def clear_symbols_at_begin(text: str, *symbols: str) -> str:
    """Remove any leading characters contained in *symbols*.

    Examples:
        >>> clear_symbols_at_begin("--x-", "-")
        'x-'
    """
    return require_not_none(text, "text").lstrip("".join(symbols))


def clear_symbols_at_end(text: str, *symbols: str) -> str:
    return require_not_none(text, "text").rstrip("".join(symbols))


def clear_symbols_at_begin_and_end(text: str, *symbols: str) -> str:
    return clear_symbols_at_end(clear_symbols_at_begin(text, *symbols), *symbols)


def clear_system_symbols_at_begin_and_end(text: str) -> str:
    """Trim spaces, line feeds, and carriage returns from both ends."""
    return clear_symbols_at_begin_and_end(text, *SYSTEM_SYMBOLS)


def not_empty(text: str | None, name: str) -> str:
    """Return *text*, rejecting None and the empty string.

    Raises:
        ArgumentNullError: *text* is None.
        ValueError: *text* is empty.
    """
    require_not_none(text, name)
    if not text:
        raise ValueError(f"Argument '{name}' must not be empty")
    return text


def enum_lines(text: str, skip_empty: bool = False) -> Iterator[str]:
    """Iterate over the lines of *text* without line terminators."""
    lines = require_not_none(text, "text").splitlines()
    return (line for line in lines if line or not skip_empty)


def to_int_or_none(text: str | None) -> int | None:
    """Parse *text* as an int, returning None when it is not one."""
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def to_float_or_none(text: str | None) -> float | None:
    """Parse *text* as a float, returning None when it is not one."""
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None
