from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence

from .indexer import find_search_term_in_book
from .matcher import compile_matcher
from .models import Book, SearchResponse, SearchResult
from .validation import check_scanned_books

logger = logging.getLogger(__name__)


def _as_books(scanned_books: Any) -> List[Book]:
    if not isinstance(scanned_books, list):
        check_scanned_books(scanned_books)
    records = [item for item in scanned_books if not isinstance(item, Book)]
    check_scanned_books(records)
    return [item if isinstance(item, Book) else Book.from_dict(item) for item in scanned_books]


def find_search_term_in_books(
    search_term: str,
    scanned_books: Any,
    max_workers: Optional[int] = None,
) -> SearchResponse:
    """Search every book for ``search_term``.

    ``scanned_books`` is a list of raw book records (as parsed from JSON) or
    of ``Book`` instances. Results are concatenated in book order. The
    response echoes ``search_term`` exactly as given.
    """
    books = _as_books(scanned_books)
    matcher = compile_matcher(search_term)
    per_book: Sequence[List[SearchResult]]
    if max_workers and max_workers > 1 and len(books) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            per_book = list(pool.map(lambda book: find_search_term_in_book(matcher, book), books))
    else:
        per_book = [find_search_term_in_book(matcher, book) for book in books]
    results: List[SearchResult] = []
    for book_results in per_book:
        results.extend(book_results)
    logger.info(
        "Search for %r matched %d lines across %d books",
        matcher.search_term,
        len(results),
        len(books),
    )
    return SearchResponse(search_term=search_term, results=results)
