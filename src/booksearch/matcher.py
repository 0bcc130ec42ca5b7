from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

WORD_CHARS = "A-Za-z0-9_"

_TOKEN = re.compile(rf"[{WORD_CHARS}]+|[^{WORD_CHARS}]+")
_WORD_RUN = re.compile(rf"[{WORD_CHARS}]+")
_NOT_AFTER_WORD = rf"(?<![{WORD_CHARS}])"
_NOT_BEFORE_WORD = rf"(?![{WORD_CHARS}])"


@dataclass(frozen=True)
class SearchMatcher:
    search_term: str
    pattern: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def spans(self, text: str) -> List[Tuple[int, int]]:
        return [(m.start(), m.end()) for m in self.pattern.finditer(text)]


def tokenize_search_term(search_term: str) -> List[str]:
    """Split a term into alternating runs of word and non-word characters.

    A word character is an ASCII letter, digit or underscore, so
    ``"__hash__"`` is a single run while ``"Canadian's"`` splits into
    ``["Canadian", "'", "s"]``.
    """
    return _TOKEN.findall(search_term)


def _token_pattern(token: str) -> str:
    if _WORD_RUN.fullmatch(token):
        return _NOT_AFTER_WORD + re.escape(token) + _NOT_BEFORE_WORD
    return re.escape(token)


def compile_matcher(search_term: str) -> SearchMatcher:
    """Build a case-sensitive whole-word matcher for ``search_term``.

    Surrounding whitespace is ignored. Every word run in the term must sit on
    word boundaries in the searched text; punctuation and inner whitespace
    are matched literally.
    """
    term = search_term.strip()
    source = "".join(_token_pattern(token) for token in tokenize_search_term(term))
    return SearchMatcher(search_term=term, pattern=re.compile(source))
