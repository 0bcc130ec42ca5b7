"""Line ordering and hyphenation repair for scanned book text.

Scanned lines can arrive in any order and OCR keeps the hyphens that split a
word across two lines. Normalizing a book sorts its lines by page and line
number and joins each broken word back onto the line where it started::

    (31, 8, "The dark-")          (31, 8, "The darkness")
    (31, 9, "ness was then")  ->  (31, 9, " was then")
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .models import Book, ScannedLine

logger = logging.getLogger(__name__)

_CONTROL_WHITESPACE = re.compile(r"[\t\n\r]")
_LEADING_WORD = re.compile(r"^[A-Za-z0-9_]+")


def clean_line(text: str) -> str:
    return _CONTROL_WHITESPACE.sub(" ", text).strip()


def sort_scanned_lines(lines: Sequence[ScannedLine]) -> List[ScannedLine]:
    return sorted(lines, key=lambda item: (item.page, item.line))


def _is_consecutive(current: ScannedLine, following: Optional[ScannedLine]) -> bool:
    if following is None:
        return False
    return following.page == current.page and following.line == current.line + 1


def _split_word_break(text: str, next_text: str) -> Optional[Tuple[str, str]]:
    """Return the repaired ``(text, next_text)`` pair, or None if no break."""
    if not text.endswith("-"):
        return None
    match = _LEADING_WORD.match(next_text)
    if not match:
        return None
    return text[:-1] + match.group(0), next_text[match.end():]


def normalize_book_lines(book: Book) -> List[ScannedLine]:
    ordered = sort_scanned_lines(book.content)
    texts = [clean_line(item.text) for item in ordered]
    normalized: List[ScannedLine] = []
    for index, current in enumerate(ordered):
        following = ordered[index + 1] if index + 1 < len(ordered) else None
        if _is_consecutive(current, following):
            repaired = _split_word_break(texts[index], texts[index + 1])
            if repaired is not None:
                texts[index], texts[index + 1] = repaired
                logger.debug(
                    "Joined word break in %s at page %d line %d",
                    book.isbn,
                    current.page,
                    current.line,
                )
        normalized.append(ScannedLine(page=current.page, line=current.line, text=texts[index]))
    return normalized
