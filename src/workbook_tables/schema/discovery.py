from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..base import is_primitive_like, is_string_like, nullable, unwrap_optional
from .columns import (
    Column,
    DataTableColumn,
    IdentityColumn,
    KeyColumn,
    MemberColumn,
    PositionalColumn,
    ValueColumn,
)
from .members import DefaultMemberProvider, MemberProvider

logger = logging.getLogger(__name__)

_default_provider = DefaultMemberProvider()


def discover_columns(
    shape: Any,
    include_fields: bool = False,
    include_properties: bool = True,
    *,
    sample: Any = None,
    provider: MemberProvider | None = None,
) -> list[Column]:
    """
    Work out the columns for rows of the given shape.

    Rules, first match wins:

    1. string-like shape -> a single ``"String"`` identity column
    2. primitive-like shape (bool / numeric, optionally nullable) -> a single
       ``"Value"`` identity column
    3. the shape's public members, filtered by the two include-flags
    4. nothing discoverable -> a single ``"ToString"`` identity column

    Parameters
    ----------
    shape
        Type of the rows (``type(row)`` or a caller-supplied row type).
    include_fields
        Include undeclared instance attributes found on ``sample``.
    include_properties
        Include declared attributes, properties and mapping keys.
    sample
        A representative row; needed for mapping rows and instance attributes.
    provider
        Member description capability, ``DefaultMemberProvider`` when omitted.
    """
    if is_string_like(shape):
        return [IdentityColumn("String", shape)]

    if is_primitive_like(shape):
        return [IdentityColumn("Value", shape)]

    provider = provider or _default_provider
    columns: list[Column] = []
    for member in provider.describe(unwrap_optional(shape), sample):
        if member.kind == "property" and not include_properties:
            continue
        if member.kind == "field" and not include_fields:
            continue
        columns.append(MemberColumn(member.name, member.value_type, member.getter))

    if not columns:
        logger.debug("No members discovered on %r, falling back to ToString", shape)
        return [IdentityColumn("ToString", shape)]
    return columns


def discover_pair_columns(
    key_shape: Any,
    value_shape: Any,
    include_fields: bool = False,
    include_properties: bool = True,
    *,
    key_sample: Any = None,
    value_sample: Any = None,
    provider: MemberProvider | None = None,
) -> list[Column]:
    keys = discover_columns(
        key_shape, include_fields, include_properties, sample=key_sample, provider=provider
    )
    values = discover_columns(
        value_shape, include_fields, include_properties, sample=value_sample, provider=provider
    )
    return [KeyColumn(c) for c in keys] + [ValueColumn(c) for c in values]


def data_table_columns(columns: Iterable[Any]) -> list[Column]:
    """
    One column per declared ``DataColumn``; nullable columns are typed
    ``Optional[data_type]``.
    """
    out: list[Column] = []
    for c in columns:
        tp = nullable(c.data_type) if c.allow_null else c.data_type
        out.append(DataTableColumn(name=c.name, caption=c.caption, value_type=tp))
    return out


def positional_columns(rows: Iterable[Sequence[Any] | None]) -> list[Column]:
    width = max((len(r) for r in rows if r is not None), default=0)
    return [PositionalColumn(i) for i in range(width)]
