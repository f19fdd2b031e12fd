from .generator import TableDocument, TableGenerator, default_css, overflow_row_text
from .renderers import Html, NULL_MARKER
from .sources import (
    RowSource,
    SequenceSource,
    DictionarySource,
    DataTableSource,
    RowFrameSource,
    ColumnFrameSource,
    source_for,
)
from .stringifier import Stringifier, EscapingStringifier, SupportsStringify


__all__ = [
    "TableDocument",
    "TableGenerator",
    "default_css",
    "overflow_row_text",
    "Html",
    "NULL_MARKER",
    "RowSource",
    "SequenceSource",
    "DictionarySource",
    "DataTableSource",
    "RowFrameSource",
    "ColumnFrameSource",
    "source_for",
    "Stringifier",
    "EscapingStringifier",
    "SupportsStringify",
]
