"""Tests for the table generator and the rendered markup."""

import pytest

from workbook_tables import InvalidConfiguration, Stringifier, TableGenerator
from workbook_tables.runtime.generator import TableDocument, default_css, overflow_row_text
from workbook_tables.runtime.sources import ColumnFrameSource, RowFrameSource, SequenceSource
from workbook_tables.schema import ColumnFrame, RowFrame


def render(items, generator=None, **kwargs):
    generator = generator or TableGenerator(**kwargs)
    source = SequenceSource(items)
    return generator.generate(source, source.columns())


class TestOverflowRows:

    @pytest.mark.parametrize(
        "shown, total, expected",
        [
            (2, 5, "3 more rows"),
            (2, 3, "1 more row"),
            (2, 2, None),
            (10, None, "Enumeration limited to 10 rows"),
        ],
    )
    def test_wording(self, shown, total, expected):
        assert overflow_row_text(shown, total) == expected

    def test_known_total(self):
        doc = render([1, 2, 3, 4, 5], max_rows=2)
        assert doc.body_rows == (("1",), ("2",))
        assert doc.overflow_row_note == "3 more rows"

    def test_singular(self):
        assert render([1, 2, 3], max_rows=2).overflow_row_note == "1 more row"

    def test_unknown_total(self):
        doc = render((i for i in range(20)), max_rows=10)
        assert len(doc.body_rows) == 10
        assert doc.overflow_row_note == "Enumeration limited to 10 rows"

    def test_exactly_max_rows_with_known_total(self):
        assert render(list(range(10)), max_rows=10).overflow_row_note is None

    def test_fewer_rows_than_cap(self):
        assert render((i for i in range(3)), max_rows=10).overflow_row_note is None

    def test_overflow_row_markup_spans_shown_columns(self):
        html = render([1, 2, 3], max_rows=1).to_html()
        assert "<tr><td></td><td colspan='1'>2 more rows</td></tr></tbody>" in html


class TestColumns:

    def test_hidden_columns_note(self):
        frame = ColumnFrame(columns={"A": ["a"], "B": ["b"], "C": ["c"]})
        source = ColumnFrameSource(frame)
        doc = TableGenerator(max_columns=1).generate(source, source.columns())
        assert doc.header_titles == ("0",)
        assert doc.body_rows == (("a",),)
        assert doc.overflow_column_note == "1, 2"
        assert doc.to_html().endswith("</table><div>Columns not shown: 1, 2</div>")

    def test_zero_columns_tolerated(self):
        doc = TableGenerator().generate(SequenceSource([1, 2]), [])
        assert doc.header_titles == ()
        assert doc.body_rows == ((), ())
        assert "<thead><tr><th>#</th></tr></thead><tbody><tr><td>0</td></tr><tr><td>1</td></tr></tbody>" in doc.to_html()

    def test_ragged_rows_read_blank(self):
        frame = RowFrame(rows=[["a"], ["b", "c", "d"]])
        source = RowFrameSource(frame)
        doc = TableGenerator().generate(source, source.columns())
        assert doc.body_rows == (("a", "", ""), ("b", "c", "d"))


class TestDocument:

    def test_absent_source(self):
        gen = TableGenerator()
        assert gen.generate_html_text(SequenceSource(None), []) == "-- null --"
        assert gen.generate_html_text(None, []) == "-- null --"
        assert TableDocument.absent_document().to_html() == "-- null --"

    def test_zero_rows_renders_header_only(self):
        doc = render([])
        assert doc.body_rows == ()
        assert doc.overflow_row_note is None
        assert "<tbody></tbody>" in doc.to_html()

    def test_full_markup(self):
        html = render(["a", "b"], css_class_name="mini", css_text=".mini {}").to_html()
        assert html == (
            "<style>.mini {}</style><table class='mini'>"
            "<thead><tr><th>#</th><th>String</th></tr></thead>"
            "<tbody><tr><td>0</td><td>a</td></tr><tr><td>1</td><td>b</td></tr></tbody>"
            "</table>"
        )

    def test_default_class_and_css(self):
        gen = TableGenerator()
        assert gen.css_class_name == "slodgeTable"
        assert gen.css_text == default_css("slodgeTable")
        assert "border-collapse: collapse" in gen.css_text

    def test_custom_class_gets_matching_default_css(self):
        gen = TableGenerator(css_class_name="compact")
        assert gen.css_text.startswith(".compact {")

    def test_stringifier_is_used(self):
        doc = render(["abcdefghijkl"], stringifier=Stringifier(max_cell_length=6))
        assert doc.body_rows == (("abc...",),)

    def test_rendering_is_idempotent(self, people):
        gen = TableGenerator(max_columns=2, max_rows=4)
        first = render(people, gen).to_html()
        second = render(people, gen).to_html()
        assert first == second

    def test_repr_html(self):
        doc = render([1])
        assert doc._repr_html_() == doc.to_html()


class TestErrors:

    def test_negative_caps(self):
        with pytest.raises(InvalidConfiguration):
            TableGenerator(max_rows=-1)

    def test_extraction_errors_propagate(self):
        class Broken:
            @property
            def value(self) -> int:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            render([Broken()])
