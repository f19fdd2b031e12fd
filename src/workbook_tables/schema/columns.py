from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, Sequence, Union, runtime_checkable

"""
Column descriptors.

A column is a titled, typed accessor from a row to a raw value. Descriptors
hold no row data; they are built once per render from the row shape and
thrown away afterwards.

The variant set is closed:

- ``MemberColumn``: reads a named member off a structured row
- ``KeyColumn`` / ``ValueColumn``: wrap another column and apply it to one
  half of a ``(key, value)`` pair
- ``PositionalColumn``: reads a fixed index off a list-like row
- ``IdentityColumn``: the row itself, for primitive/string rows or as the
  fallback when nothing else is discoverable
- ``DataTableColumn``: one declared column of a ``DataTable``
"""


@runtime_checkable
class SupportsColumn(Protocol):
    @property
    def title(self) -> str: ...
    @property
    def value_type(self) -> Any: ...
    def get_value(self, row: Any) -> Any: ...


@dataclass(frozen=True)
class MemberColumn:
    title: str
    value_type: Any
    getter: Callable[[Any], Any]

    def get_value(self, row: Any) -> Any:
        if row is None:
            return None
        return self.getter(row)


@dataclass(frozen=True)
class KeyColumn:
    inner: "Column"

    @property
    def title(self) -> str:
        return f"Key.{self.inner.title}"

    @property
    def value_type(self) -> Any:
        return self.inner.value_type

    def get_value(self, row: tuple[Any, Any]) -> Any:
        return self.inner.get_value(row[0])


@dataclass(frozen=True)
class ValueColumn:
    inner: "Column"

    @property
    def title(self) -> str:
        return f"Value.{self.inner.title}"

    @property
    def value_type(self) -> Any:
        return self.inner.value_type

    def get_value(self, row: tuple[Any, Any]) -> Any:
        return self.inner.get_value(row[1])


@dataclass(frozen=True)
class PositionalColumn:
    index: int
    value_type: Any = str

    @property
    def title(self) -> str:
        return str(self.index)

    def get_value(self, row: Sequence[Any] | None) -> Any:
        # ragged rows read as None past their end
        if row is None or self.index >= len(row):
            return None
        return row[self.index]


@dataclass(frozen=True)
class IdentityColumn:
    title: str
    value_type: Any

    def get_value(self, row: Any) -> Any:
        return row


@dataclass(frozen=True)
class DataTableColumn:
    name: str
    caption: str | None
    value_type: Any

    @property
    def title(self) -> str:
        return self.caption or self.name

    def get_value(self, row: Mapping[str, Any]) -> Any:
        return row[self.name]


Column = Union[
    MemberColumn,
    KeyColumn,
    ValueColumn,
    PositionalColumn,
    IdentityColumn,
    DataTableColumn,
]


def titles(columns: Sequence[Column]) -> list[str]:
    return [c.title for c in columns]
