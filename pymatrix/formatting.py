"""
Text rendering for matrices.

The default style produces the fixed "[a, b; c, d]" format: elements of a
row joined by ", ", rows joined by "; ", the whole matrix bracketed, no
trailing separators.
"""

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class DisplayStyle:
    """Delimiters used when rendering a matrix as text."""
    open: str
    close: str
    element_separator: str
    row_separator: str


DEFAULT_STYLE = DisplayStyle(
    open='[',
    close=']',
    element_separator=', ',
    row_separator='; ',
)


def render(rows: Iterable[Iterable[Any]], style: DisplayStyle = DEFAULT_STYLE) -> str:
    """Render rows of elements with str() using the given style."""
    body = style.row_separator.join(
        style.element_separator.join(str(x) for x in row) for row in rows
    )
    return f"{style.open}{body}{style.close}"
