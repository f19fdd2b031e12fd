from dataclasses import dataclass
from typing import Iterable

"""
HTML fragment helpers.

Cell text is written verbatim: whatever the stringifier produced is what ends
up in the markup. Use ``EscapingStringifier`` for untrusted values.
"""

NULL_MARKER = "-- null --"


@dataclass(frozen=True)
class Html:
    """
    Opaque renderable wrapper around generated markup. Notebook front ends
    pick it up through ``_repr_html_``; template engines through ``__html__``.
    """
    raw: str

    def __html__(self) -> str:
        return self.raw

    def _repr_html_(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


def td(val: object, *, header: bool = False, colspan: int | None = None) -> str:
    tag = "th" if header else "td"
    span_attr = f" colspan='{colspan}'" if colspan is not None else ""
    return f"<{tag}{span_attr}>{val}</{tag}>"


def tr(cells: Iterable[object], *, header: bool = False) -> str:
    """
    Render a <tr> where each cell is <td> or <th> depending on `header`.

    Example:
        tr(["#", "Name", "Age"], header=True)
        tr([0, "Ada", 36])
    """
    return f"<tr>{''.join(td(cell, header=header) for cell in cells)}</tr>"


def overflow_tr(text: str, colspan: int) -> str:
    # blank index cell, then the note spanning every shown column
    return f"<tr>{td('')}{td(text, colspan=colspan)}</tr>"


def table(rows: Iterable[str], *, header: list[str], class_name: str, css: str) -> str:
    thead = f"<thead>{tr(header, header=True)}</thead>"
    tbody = f"<tbody>{''.join(rows)}</tbody>"
    return f"<style>{css}</style><table class='{class_name}'>{thead}{tbody}</table>"


def note(label: str, items: Iterable[str]) -> str:
    return f"<div>{label}: {', '.join(items)}</div>"
