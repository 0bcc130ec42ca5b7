from __future__ import annotations

from rich.text import Text

from .matcher import SearchMatcher

HIGHLIGHT_STYLE = "bold black on yellow"


def highlight_matches(text: str, matcher: SearchMatcher, style: str = HIGHLIGHT_STYLE) -> Text:
    rendered = Text(text)
    for start, end in matcher.spans(text):
        rendered.stylize(style, start, end)
    return rendered
