from __future__ import annotations

from dataclasses import fields, replace
from typing import Any

from .base import InvalidConfiguration
from .runtime.generator import TableDocument, TableGenerator
from .runtime.renderers import Html
from .runtime.sources import source_for
from .schema.members import MemberProvider
from .utils.load import TableOptions


def _resolve_options(options: TableOptions | None, overrides: dict[str, Any]) -> TableOptions:
    options = options or TableOptions()
    unknown = sorted(set(overrides) - {f.name for f in fields(TableOptions)})
    if unknown:
        raise InvalidConfiguration(f"Unknown table option(s): {unknown}")
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return replace(options, **overrides) if overrides else options


def generate_table(
    data: Any,
    *,
    options: TableOptions | None = None,
    row_type: type | None = None,
    key_type: type | None = None,
    value_type: type | None = None,
    provider: MemberProvider | None = None,
    **overrides: Any,
) -> TableDocument:
    """
    Render ``data`` into a ``TableDocument``.

    ``data`` may be any iterable of records, a mapping, a ``DataTable``, a
    ``RowFrame`` or a ``ColumnFrame``; ``None`` gives the absent document.
    Keyword overrides (``max_rows=25`` etc.) are applied on top of
    ``options``.
    """
    opts = _resolve_options(options, overrides)
    source = source_for(data, row_type=row_type, key_type=key_type, value_type=value_type)
    columns = source.columns(
        opts.include_fields, opts.include_properties, provider, limit=opts.max_rows
    )
    return TableGenerator.from_options(opts).generate(source, columns)


def generate_html_text(data: Any, **kwargs: Any) -> str:
    return generate_table(data, **kwargs).to_html()


def as_table(data: Any, **kwargs: Any) -> Html:
    """
    Render ``data`` as a notebook-displayable HTML table.

    This is the public, stable API.

        >>> as_table({"x": 1, "y": 2}, max_rows=10)   # doctest: +SKIP
    """
    return Html(generate_html_text(data, **kwargs))
