from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ..base import InvalidConfiguration
from ..schema.columns import Column
from .renderers import NULL_MARKER, Html, note, overflow_tr, table, tr
from .sources import RowSource
from .stringifier import Stringifier, SupportsStringify

if TYPE_CHECKING:
    from ..utils.load import TableOptions

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = "slodgeTable"
INDEX_TITLE = "#"
HIDDEN_COLUMNS_LABEL = "Columns not shown"


def default_css(class_name: str = DEFAULT_CLASS_NAME) -> str:
    return (
        f".{class_name} {{ border-collapse: collapse; }} \n"
        f".{class_name} th {{ border: 0px; padding-left: 4px; padding-right: 4px; text-align:left; }}\n"
        f".{class_name} td {{ border: 0px; padding-left: 4px; padding-right: 4px; text-align:left; }}\n"
    )


def overflow_row_text(shown: int, total: int | None) -> str | None:
    """
    Footer text for a table that showed ``shown`` rows and hit the row cap.

        >>> overflow_row_text(2, 5)
        '3 more rows'
        >>> overflow_row_text(2, 3)
        '1 more row'
        >>> overflow_row_text(10, None)
        'Enumeration limited to 10 rows'
    """
    if total is None:
        return f"Enumeration limited to {shown} rows"
    if total > shown:
        more = total - shown
        return f"{more} more row{'s' if more > 1 else ''}"
    return None


@dataclass(frozen=True)
class TableDocument:
    """
    The rendered table before it is turned into markup.

    ``absent`` documents stand for a missing source and render as the bare
    ``-- null --`` marker.
    """
    css: str
    class_name: str
    header_titles: tuple[str, ...]
    body_rows: tuple[tuple[str, ...], ...]
    overflow_row_note: Optional[str] = None
    overflow_column_note: Optional[str] = None
    absent: bool = False

    @classmethod
    def absent_document(cls) -> "TableDocument":
        return cls(css="", class_name="", header_titles=(), body_rows=(), absent=True)

    @property
    def shown_column_count(self) -> int:
        return len(self.header_titles)

    def to_html(self) -> str:
        if self.absent:
            return NULL_MARKER

        rows = [tr([i, *cells]) for i, cells in enumerate(self.body_rows)]
        if self.overflow_row_note is not None:
            rows.append(overflow_tr(self.overflow_row_note, self.shown_column_count))

        html = table(
            rows,
            header=[INDEX_TITLE, *self.header_titles],
            class_name=self.class_name,
            css=self.css,
        )
        if self.overflow_column_note is not None:
            html += note(HIDDEN_COLUMNS_LABEL, [self.overflow_column_note])
        return html

    def _repr_html_(self) -> str:
        return self.to_html()


class TableGenerator:
    """
    Builds a bounded table from a row source and its column descriptors.

    At most ``max_rows`` rows are pulled from the source and at most
    ``max_columns`` columns are shown. Hidden rows are reported in a footer
    row (using the source's cheap total count when it has one) and hidden
    columns in a note under the table.
    """

    def __init__(
        self,
        max_columns: int = 10,
        max_rows: int = 10,
        stringifier: SupportsStringify | None = None,
        css_class_name: str | None = None,
        css_text: str | None = None,
    ):
        if max_columns < 0 or max_rows < 0:
            raise InvalidConfiguration(
                f"max_columns and max_rows must not be negative, got {max_columns}, {max_rows}"
            )
        self.max_columns = max_columns
        self.max_rows = max_rows
        self.stringifier = stringifier or Stringifier()
        self.css_class_name = css_class_name or DEFAULT_CLASS_NAME
        self.css_text = css_text if css_text is not None else default_css(self.css_class_name)

    @classmethod
    def from_options(cls, options: "TableOptions") -> "TableGenerator":
        return cls(
            max_columns=options.max_columns,
            max_rows=options.max_rows,
            stringifier=options.stringifier or Stringifier(options.max_cell_length),
            css_class_name=options.css_class_name,
            css_text=options.css_text,
        )

    def generate(self, source: RowSource | None, columns: Sequence[Column]) -> TableDocument:
        if source is None or source.is_absent:
            return TableDocument.absent_document()

        shown = list(columns[: self.max_columns])
        hidden = list(columns[self.max_columns :])
        logger.debug(
            "Rendering %d of %d columns, at most %d rows", len(shown), len(columns), self.max_rows
        )

        body: list[tuple[str, ...]] = []
        for row in source.rows(self.max_rows):
            body.append(tuple(
                self.stringifier.stringify(c.title, c.value_type, c.get_value(row))
                for c in shown
            ))

        overflow = None
        if len(body) >= self.max_rows:
            overflow = overflow_row_text(len(body), source.total_count_if_known)
            logger.debug("Row cap %d reached: %s", self.max_rows, overflow)

        return TableDocument(
            css=self.css_text,
            class_name=self.css_class_name,
            header_titles=tuple(c.title for c in shown),
            body_rows=tuple(body),
            overflow_row_note=overflow,
            overflow_column_note=", ".join(c.title for c in hidden) if hidden else None,
        )

    def generate_html_text(self, source: RowSource | None, columns: Sequence[Column]) -> str:
        return self.generate(source, columns).to_html()

    def generate_html(self, source: RowSource | None, columns: Sequence[Column]) -> Html:
        return Html(self.generate_html_text(source, columns))

    def __repr__(self) -> str:
        return (
            "<TableGenerator "
            f"max_columns={self.max_columns} "
            f"max_rows={self.max_rows} "
            f"class={self.css_class_name}>"
        )
