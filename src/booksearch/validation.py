from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("title", "isbn", "content")
LINE_FIELDS = ("page", "line", "text")


class MalformedInputError(ValueError):
    """Raised when scanned book records do not have the expected shape."""


def _has_field(record: Any, name: str) -> bool:
    return isinstance(record, Mapping) and name in record


def check_scanned_books(scanned_books: Any) -> Any:
    """Check that ``scanned_books`` is a list of book records.

    Each book needs ``title``, ``isbn`` and a ``content`` list whose items
    carry ``page``, ``line`` and ``text``. The value is returned unchanged
    so callers can validate inline.

    Raises:
        MalformedInputError: naming the first violated constraint.
    """
    if not isinstance(scanned_books, list):
        raise MalformedInputError("Invalid Argument: scanned books must be a list")
    for book in scanned_books:
        for name in BOOK_FIELDS:
            if not _has_field(book, name):
                raise MalformedInputError(
                    f'Invalid Argument: book records must contain a "{name}" field'
                )
        lines = book["content"]
        if not isinstance(lines, list):
            raise MalformedInputError(
                'Invalid Argument: "content" field of each book record must be a list'
            )
        for line in lines:
            for name in LINE_FIELDS:
                if not _has_field(line, name):
                    raise MalformedInputError(
                        f'Invalid Argument: line records must contain a "{name}" field'
                    )
    logger.debug("Validated %d book records", len(scanned_books))
    return scanned_books
