from __future__ import annotations

from collections.abc import Mapping
from itertools import zip_longest
from typing import Any, Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DataColumn(BaseModel):
    """
    A declared column of a ``DataTable``.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    data_type: type = object
    caption: Optional[str] = None
    allow_null: bool = True


class DataRow(Mapping):
    """
    Read-only view of one ``DataTable`` row, keyed by column name.
    """

    __slots__ = ("_positions", "_values")

    def __init__(self, positions: Mapping[str, int], values: tuple[Any, ...]):
        self._positions = positions
        self._values = values

    def __getitem__(self, name: str) -> Any:
        return self._values[self._positions[name]]

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"DataRow({dict(self)!r})"


class DataTable(BaseModel):
    """
    A small in-memory tabular dataset: typed, optionally captioned columns
    and positional rows.

    Rows are checked against the declared columns when the table is built:
    every row must have one value per column and columns declared with
    ``allow_null=False`` must not hold ``None``.
    """

    columns: list[DataColumn]
    rows: list[tuple[Any, ...]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_rows(self) -> "DataTable":
        names = [c.name for c in self.columns]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate column names: {names}")

        width = len(self.columns)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} values, expected {width}")
            for col, value in zip(self.columns, row):
                if value is None and not col.allow_null:
                    raise ValueError(f"Row {i}: column '{col.name}' does not allow null")
        return self

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: list[DataColumn] | None = None,
    ) -> "DataTable":
        """
        Build a table from mapping records. When ``columns`` is omitted, the
        keys of the first record become untyped nullable columns.
        """
        records = list(records)
        if columns is None:
            first = records[0] if records else {}
            columns = [DataColumn(name=str(k)) for k in first]
        rows = [tuple(r.get(c.name) for c in columns) for r in records]
        return cls(columns=columns, rows=rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def data_rows(self) -> Iterator[DataRow]:
        positions = {c.name: i for i, c in enumerate(self.columns)}
        for row in self.rows:
            yield DataRow(positions, row)


class RowFrame(BaseModel):
    """
    Row-major text frame. Rows may have different lengths.
    """

    rows: list[list[Optional[str]]] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(r) for r in self.rows), default=0)


class ColumnFrame(BaseModel):
    """
    Column-major text frame: named columns of possibly different lengths.

    Reading it row by row zips the columns together; columns that run out
    early read as ``None`` until the longest column is exhausted.
    """

    columns: dict[str, list[Optional[str]]] = Field(default_factory=dict)

    @property
    def names(self) -> list[str]:
        return list(self.columns)

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def longest(self) -> int:
        return max((len(c) for c in self.columns.values()), default=0)

    def iter_rows(self) -> Iterator[list[Optional[str]]]:
        for row in zip_longest(*self.columns.values(), fillvalue=None):
            yield list(row)
