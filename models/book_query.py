"""
List query for Books: filter -> sort -> paginate.

Each stage only sees the survivors of the previous one. Parameters arrive
as raw query-string values (``request.args`` or any mapping); unusable
values are ignored rather than rejected, so listing never fails.

Supported parameters:
  - title:  case-insensitive substring of the book title
  - author: case-insensitive substring of the author name
  - year:   exact publication year
  - sort:   "<field>_<direction>", field in SORT_FIELDS, direction asc|desc
  - limit:  page size (>= 1); without it no pagination happens
  - page:   1-indexed page number (default 1)
"""
from __future__ import annotations

import math
from typing import Iterable, List, Mapping, Optional, Tuple

from models.author import Author
from models.book import Book

# Sorting allowlist: API field -> record attribute
SORT_FIELDS = {
    "title": "title",
    "year": "year",
    "id": "id",
    "authorId": "author_id",
}


def _parse_number(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number):
        return None
    return number


def _present(params: Mapping, name: str) -> Optional[str]:
    value = params.get(name)
    if value is None:
        return None
    return str(value)


def parse_sort(sort: Optional[str]) -> Optional[Tuple[str, bool]]:
    """Return (attribute, descending) or None when the field is not sortable."""
    if not sort:
        return None
    field, _, direction = str(sort).partition("_")
    attr = SORT_FIELDS.get(field)
    if attr is None:
        return None
    return attr, direction == "desc"


def filter_by_title(books: List[Book], title: str) -> List[Book]:
    needle = title.lower()
    return [b for b in books if needle in b.title.strip().lower()]


def filter_by_author(books: List[Book], authors: Iterable[Author], name: str) -> List[Book]:
    # matched against the whole Author table, not only the surviving Books
    needle = name.lower()
    author_ids = {a.id for a in authors if needle in a.name.lower()}
    return [b for b in books if b.author_id in author_ids]


def filter_by_year(books: List[Book], year: float) -> List[Book]:
    return [b for b in books if b.year is not None and b.year == year]


def sort_books(books: List[Book], attr: str, descending: bool = False) -> List[Book]:
    """Stable sort; records missing the value go last in either direction."""
    with_value = [b for b in books if getattr(b, attr) is not None]
    without_value = [b for b in books if getattr(b, attr) is None]
    ordered = sorted(with_value, key=lambda b: getattr(b, attr), reverse=descending)
    return ordered + without_value


def paginate(books: List[Book], limit, page=None) -> List[Book]:
    size = _parse_number(limit)
    if size is None or math.isinf(size):
        return books
    size = max(1, int(size))

    number = _parse_number(page)
    if number is None or math.isinf(number):
        number = 1
    number = max(1, int(number))

    start = (number - 1) * size
    return books[start:start + size]


def query_books(books: Iterable[Book], authors: Iterable[Author], params: Mapping) -> List[Book]:
    """Apply the list query to ``books``; never mutates its inputs."""
    results = list(books)

    title = _present(params, "title")
    if title:
        results = filter_by_title(results, title)

    author = _present(params, "author")
    if author:
        results = filter_by_author(results, authors, author)

    year = _parse_number(params.get("year"))
    if year is not None:
        results = filter_by_year(results, year)

    sort = parse_sort(_present(params, "sort"))
    if sort:
        results = sort_books(results, *sort)

    if params.get("limit") is not None:
        results = paginate(results, params.get("limit"), params.get("page"))

    return results
