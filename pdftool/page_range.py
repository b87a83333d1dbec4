"""Page range parsing for split and extract operations.

Expressions use 1-based page numbers, single pages and inclusive ranges
separated by commas (``"1-3,5,7-9"``). Parsing yields the zero-based page
indices that ``pypdf`` expects, sorted and free of duplicates.

Numbers outside the document are dropped rather than rejected, so ``"1-100"``
against a 10 page document selects all ten pages. A range written backwards
(``"5-3"``) selects nothing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from .exceptions import EmptyExpressionError, EmptyResultError, MalformedTokenError

SelectedPageSet = List[int]

_INTEGER_RE = re.compile(r"^\+?[0-9]+$")

# Longer numbers lie beyond any document and are clamped before conversion.
_MAX_DIGITS = 18
_PAGE_NUMBER_CEILING = 10 ** _MAX_DIGITS


def _parse_number(text: str, *, token: str, expression: str) -> int:
    candidate = text.strip()
    if not _INTEGER_RE.match(candidate):
        raise MalformedTokenError(
            f"Invalid page number '{candidate}' in '{token}'. Expected a positive integer.",
            expression=expression,
            token=token,
        )
    digits = candidate.lstrip("+").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return _PAGE_NUMBER_CEILING
    return int(digits or "0")


def _parse_token(token: str, expression: str) -> tuple[int, int]:
    """Return the inclusive ``(start, end)`` bounds written in *token*."""

    if "-" not in token:
        page = _parse_number(token, token=token, expression=expression)
        return page, page

    parts = token.split("-")
    if len(parts) != 2:
        raise MalformedTokenError(
            f"Invalid page range format: '{token}'. Expected 'start-end'.",
            expression=expression,
            token=token,
        )
    start = _parse_number(parts[0], token=token, expression=expression)
    end = _parse_number(parts[1], token=token, expression=expression)
    return start, end


def parse_page_range(expression: str, page_count: int) -> SelectedPageSet:
    """Parse *expression* into sorted zero-based page indices.

    Args:
        expression: Page range text such as ``"1-3,5"``.
        page_count: Number of pages in the document the expression refers to.

    Raises:
        EmptyExpressionError: If *expression* is empty or whitespace.
        MalformedTokenError: If a token is not a number or ``start-end`` pair.
        EmptyResultError: If no page in the expression exists in the document.
        ValueError: If *page_count* is negative.
    """

    if page_count < 0:
        raise ValueError(f"Page count must be >= 0, got {page_count}")

    if expression is None or not expression.strip():
        raise EmptyExpressionError(
            "Page range cannot be empty.", expression=expression
        )

    selected: set[int] = set()
    for raw_token in expression.split(","):
        token = raw_token.strip()
        start, end = _parse_token(token, expression)

        # Only walk the part of the range that lies inside the document.
        first = max(1, start)
        last = min(end, page_count)
        selected.update(page - 1 for page in range(first, last + 1))

    if not selected:
        raise EmptyResultError(
            f"Page range '{expression.strip()}' does not select any of the "
            f"{page_count} page(s) in the document.",
            expression=expression,
        )

    return sorted(selected)


def format_page_range(indices: Iterable[int]) -> str:
    """Render zero-based *indices* as a compact 1-based range expression.

    >>> format_page_range([0, 1, 2, 4])
    '1-3,5'
    """

    pages = sorted({index + 1 for index in indices})
    if not pages:
        return ""

    parts: List[str] = []
    run_start = previous = pages[0]
    for page in pages[1:]:
        if page == previous + 1:
            previous = page
            continue
        parts.append(_format_run(run_start, previous))
        run_start = previous = page
    parts.append(_format_run(run_start, previous))
    return ",".join(parts)


def _format_run(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


@dataclass(frozen=True)
class PageRangeSelector:
    """Select pages of a document with a known page count."""

    page_count: int

    def __post_init__(self) -> None:
        if self.page_count < 0:
            raise ValueError(f"Page count must be >= 0, got {self.page_count}")

    def parse(self, expression: str) -> SelectedPageSet:
        return parse_page_range(expression, self.page_count)


__all__ = [
    "SelectedPageSet",
    "PageRangeSelector",
    "parse_page_range",
    "format_page_range",
]
