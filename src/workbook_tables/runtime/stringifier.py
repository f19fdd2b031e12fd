from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from html import escape
from typing import Any, Protocol, runtime_checkable

from ..base import InvalidConfiguration

MIN_CELL_LENGTH = 4
DEFAULT_MAX_CELL_LENGTH = 50
ELLIPSIS = "..."


@runtime_checkable
class SupportsStringify(Protocol):
    def stringify(self, title: str, value_type: Any, value: Any) -> str: ...


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_timestamp(value: datetime) -> str:
    """
    Sortable universal form, ``2024-03-01 13:45:00Z``. Aware values are
    converted to UTC first.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%SZ")


def format_duration(value: timedelta) -> str:
    """
    General short duration form: ``[-][d:]h:mm:ss[.fffffff]``.

        >>> format_duration(timedelta(hours=1, minutes=2, seconds=3))
        '1:02:03'
        >>> format_duration(timedelta(days=2, microseconds=500000))
        '2:0:00:00.5'
    """
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    hours, rem = divmod(value.seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    text = f"{hours}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}:{text}"
    if value.microseconds:
        text += "." + f"{value.microseconds:06d}".rstrip("0")
    return sign + text


class Stringifier:
    """
    Turns one raw cell value into display text of bounded length.

    ``title`` and ``value_type`` are passed through so that subclasses can
    special-case columns; the default implementation ignores them. Override
    ``format_value`` to change how a value is formatted while keeping the
    length limit.
    """

    def __init__(self, max_cell_length: int = DEFAULT_MAX_CELL_LENGTH):
        self.max_cell_length = max_cell_length

    @property
    def max_cell_length(self) -> int:
        return self._max_cell_length

    @max_cell_length.setter
    def max_cell_length(self, value: int) -> None:
        if value < MIN_CELL_LENGTH:
            raise InvalidConfiguration(
                f"max_cell_length must be at least {MIN_CELL_LENGTH}, got {value}"
            )
        self._max_cell_length = value

    def stringify(self, title: str, value_type: Any, value: Any) -> str:
        return self.truncate(self.format_value(value))

    def truncate(self, text: str) -> str:
        if len(text) > self.max_cell_length:
            return text[: self.max_cell_length - len(ELLIPSIS)] + ELLIPSIS
        return text

    def format_value(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, datetime):
            if value.time() == time(0):
                return format_date(value)
            return format_timestamp(value)
        if isinstance(value, date):
            return format_date(value)
        if isinstance(value, timedelta):
            return format_duration(value)
        return str(value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} max_cell_length={self.max_cell_length}>"


class EscapingStringifier(Stringifier):
    """
    Stringifier for untrusted values: the truncated text is HTML-escaped.
    """

    def stringify(self, title: str, value_type: Any, value: Any) -> str:
        return escape(super().stringify(title, value_type, value))
