from __future__ import annotations

import logging
from typing import List, Set, Tuple

from .matcher import SearchMatcher
from .models import Book, ScannedLine, SearchResult
from .normalizer import normalize_book_lines

logger = logging.getLogger(__name__)


def _search_lines(
    matcher: SearchMatcher, isbn: str, lines: List[ScannedLine]
) -> List[SearchResult]:
    seen: Set[Tuple[str, int, int]] = set()
    results: List[SearchResult] = []
    for scanned in lines:
        key = (isbn, scanned.page, scanned.line)
        if key in seen or not matcher.matches(scanned.text):
            continue
        seen.add(key)
        results.append(SearchResult(isbn=isbn, page=scanned.page, line=scanned.line))
    return results


def find_search_term_in_book(matcher: SearchMatcher, book: Book) -> List[SearchResult]:
    """Search the normalized lines of ``book``.

    A line yields at most one result, however many times the term occurs on
    it. Results follow page and line order.
    """
    results = _search_lines(matcher, book.isbn, normalize_book_lines(book))
    logger.debug("Found %d matching lines in %s", len(results), book.isbn)
    return results
