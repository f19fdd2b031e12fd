from .columns import (
    Column,
    SupportsColumn,
    MemberColumn,
    KeyColumn,
    ValueColumn,
    PositionalColumn,
    IdentityColumn,
    DataTableColumn,
)
from .discovery import discover_columns, discover_pair_columns, data_table_columns, positional_columns
from .frames import DataColumn, DataTable, DataRow, RowFrame, ColumnFrame
from .members import Member, MemberProvider, DefaultMemberProvider

__all__ = [
    "Column",
    "SupportsColumn",
    "MemberColumn",
    "KeyColumn",
    "ValueColumn",
    "PositionalColumn",
    "IdentityColumn",
    "DataTableColumn",
    "discover_columns",
    "discover_pair_columns",
    "data_table_columns",
    "positional_columns",
    "DataColumn",
    "DataTable",
    "DataRow",
    "RowFrame",
    "ColumnFrame",
    "Member",
    "MemberProvider",
    "DefaultMemberProvider",
]
