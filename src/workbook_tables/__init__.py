from .api import (
    as_table,
    generate_table,
    generate_html_text,
)
from .base import InvalidConfiguration
from .runtime import (
    Html,
    Stringifier,
    EscapingStringifier,
    SupportsStringify,
    TableDocument,
    TableGenerator,
    source_for,
)
from .schema import (
    DataColumn,
    DataTable,
    RowFrame,
    ColumnFrame,
    discover_columns,
)
from .utils import TableOptions, load_options, dump_options

__all__ = [
    "as_table",
    "generate_table",
    "generate_html_text",
    "InvalidConfiguration",
    "Html",
    "Stringifier",
    "EscapingStringifier",
    "SupportsStringify",
    "TableDocument",
    "TableGenerator",
    "source_for",
    "DataColumn",
    "DataTable",
    "RowFrame",
    "ColumnFrame",
    "discover_columns",
    "TableOptions",
    "load_options",
    "dump_options",
]
