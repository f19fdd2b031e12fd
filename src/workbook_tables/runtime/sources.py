from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence, Sized
from itertools import chain, islice
from typing import Any, Optional

from ..schema.columns import Column, PositionalColumn
from ..schema.discovery import data_table_columns, discover_columns, discover_pair_columns, positional_columns
from ..schema.frames import ColumnFrame, DataTable, RowFrame
from ..schema.members import MemberProvider

"""
Row sources.

Each adapter gives the generator the same view over a different container:

- ``rows(limit)``: at most ``limit`` rows, lazily, consumed once
- ``is_absent``: the container reference itself is ``None``
- ``total_count_if_known``: a cheap (O(1)) total, or ``None``
- ``columns(...)``: the column descriptors for the container's row shape,
  sampled from at most ``limit`` rows
"""

logger = logging.getLogger(__name__)

COUNT_ATTRIBUTES = ("count", "Count", "length", "Length")


def _first_present(rows: Iterable[Any]) -> Any:
    return next((r for r in rows if r is not None), None)


class RowSource(ABC):

    @property
    @abstractmethod
    def is_absent(self) -> bool: ...

    @property
    @abstractmethod
    def total_count_if_known(self) -> int | None: ...

    @abstractmethod
    def rows(self, limit: int) -> Iterator[Any]: ...

    @abstractmethod
    def columns(
        self,
        include_fields: bool = False,
        include_properties: bool = True,
        provider: MemberProvider | None = None,
        limit: int | None = None,
    ) -> list[Column]: ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} absent={self.is_absent} total={self.total_count_if_known}>"


class SequenceSource(RowSource):
    """
    Any iterable of rows. The row shape is ``row_type`` when given, otherwise
    the type of the first non-None row among the first ``limit`` rows (the
    ones that get rendered). For one-shot iterators the peeked rows are
    buffered and replayed, so no more than ``limit`` rows are ever pulled.
    """

    def __init__(self, items: Optional[Iterable[Any]], row_type: type | None = None):
        self._items = items
        self._row_type = row_type
        self._iterator: Iterator[Any] | None = None
        self._buffer: list[Any] = []

    @property
    def is_absent(self) -> bool:
        return self._items is None

    @property
    def total_count_if_known(self) -> int | None:
        if self._items is None:
            return None
        if isinstance(self._items, Sized):
            return len(self._items)
        for name in COUNT_ATTRIBUTES:
            value = getattr(self._items, name, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        return None

    def _sample(self, limit: int | None = None) -> Any:
        if self._items is None:
            return None
        if isinstance(self._items, Sequence):
            return _first_present(islice(self._items, limit))
        if self._iterator is None:
            self._iterator = iter(self._items)
        while not self._buffer or self._buffer[-1] is None:
            if limit is not None and len(self._buffer) >= limit:
                break
            pulled = list(islice(self._iterator, 1))
            if not pulled:
                break
            self._buffer.extend(pulled)
        return _first_present(self._buffer)

    def rows(self, limit: int) -> Iterator[Any]:
        if self._items is None:
            return iter(())
        if isinstance(self._items, Sequence):
            return islice(self._items, limit)
        if self._iterator is None:
            self._iterator = iter(self._items)
        return islice(chain(self._buffer, self._iterator), limit)

    def columns(self, include_fields=False, include_properties=True, provider=None, limit=None):
        if self._items is None:
            return []
        sample = self._sample(limit)
        shape = self._row_type or type(sample)
        return discover_columns(
            shape, include_fields, include_properties, sample=sample, provider=provider
        )


class DictionarySource(RowSource):
    """
    Mapping rows are ``(key, value)`` pairs; keys and values get their own
    columns, titled ``Key.*`` and ``Value.*``.
    """

    def __init__(
        self,
        mapping: Optional[Mapping[Any, Any]],
        key_type: type | None = None,
        value_type: type | None = None,
    ):
        self._mapping = mapping
        self._key_type = key_type
        self._value_type = value_type

    @property
    def is_absent(self) -> bool:
        return self._mapping is None

    @property
    def total_count_if_known(self) -> int | None:
        return None if self._mapping is None else len(self._mapping)

    def rows(self, limit: int) -> Iterator[tuple[Any, Any]]:
        if self._mapping is None:
            return iter(())
        return islice(self._mapping.items(), limit)

    def columns(self, include_fields=False, include_properties=True, provider=None, limit=None):
        if self._mapping is None:
            return []
        pairs = list(islice(self._mapping.items(), limit))
        key = _first_present(k for k, _ in pairs)
        value = _first_present(v for _, v in pairs)
        return discover_pair_columns(
            self._key_type or type(key),
            self._value_type or type(value),
            include_fields,
            include_properties,
            key_sample=key,
            value_sample=value,
            provider=provider,
        )


class DataTableSource(RowSource):

    def __init__(self, table: Optional[DataTable]):
        self._table = table

    @property
    def is_absent(self) -> bool:
        return self._table is None

    @property
    def total_count_if_known(self) -> int | None:
        return None if self._table is None else self._table.row_count

    def rows(self, limit: int) -> Iterator[Any]:
        if self._table is None:
            return iter(())
        return islice(self._table.data_rows(), limit)

    def columns(self, include_fields=False, include_properties=True, provider=None, limit=None):
        # declared columns only; the include-flags do not apply
        if self._table is None:
            return []
        return data_table_columns(self._table.columns)


class RowFrameSource(RowSource):

    def __init__(self, frame: Optional[RowFrame]):
        self._frame = frame

    @property
    def is_absent(self) -> bool:
        return self._frame is None

    @property
    def total_count_if_known(self) -> int | None:
        return None if self._frame is None else self._frame.row_count

    def rows(self, limit: int) -> Iterator[list[Optional[str]]]:
        if self._frame is None:
            return iter(())
        return islice(self._frame.rows, limit)

    def columns(self, include_fields=False, include_properties=True, provider=None, limit=None):
        if self._frame is None:
            return []
        return positional_columns(self._frame.rows)


class ColumnFrameSource(RowSource):

    def __init__(self, frame: Optional[ColumnFrame]):
        self._frame = frame

    @property
    def is_absent(self) -> bool:
        return self._frame is None

    @property
    def total_count_if_known(self) -> int | None:
        return None if self._frame is None else self._frame.longest

    def rows(self, limit: int) -> Iterator[list[Optional[str]]]:
        if self._frame is None:
            return iter(())
        return islice(self._frame.iter_rows(), limit)

    def columns(self, include_fields=False, include_properties=True, provider=None, limit=None):
        if self._frame is None:
            return []
        return [PositionalColumn(i) for i in range(self._frame.width)]


def source_for(
    data: Any,
    *,
    row_type: type | None = None,
    key_type: type | None = None,
    value_type: type | None = None,
) -> RowSource:
    """
    Pick the row source adapter matching ``data``.

    ``None`` becomes an absent ``SequenceSource``. Frames and tables are
    checked before the generic cases (pydantic models are iterable).

    Raises
    ------
    TypeError
        If ``data`` is not iterable.
    """
    if data is None:
        source: RowSource = SequenceSource(None, row_type)
    elif isinstance(data, DataTable):
        source = DataTableSource(data)
    elif isinstance(data, RowFrame):
        source = RowFrameSource(data)
    elif isinstance(data, ColumnFrame):
        source = ColumnFrameSource(data)
    elif isinstance(data, Mapping):
        source = DictionarySource(data, key_type, value_type)
    elif isinstance(data, Iterable):
        source = SequenceSource(data, row_type)
    else:
        raise TypeError(f"Cannot render {type(data).__name__} as a table: not iterable")

    logger.debug("Using %s for %s", type(source).__name__, type(data).__name__)
    return source
