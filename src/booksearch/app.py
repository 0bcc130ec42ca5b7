from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Label, ListItem, ListView, Static

from .loader import load_scanned_books
from .matcher import SearchMatcher, compile_matcher
from .models import Book, SearchResponse
from .normalizer import normalize_book_lines
from .renderer import highlight_matches
from .search import find_search_term_in_books
from .validation import MalformedInputError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = os.environ.get("BOOKSEARCH_LOG_LEVEL", "WARNING")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ResultEntry:
    isbn: str
    title: str
    page: int
    line: int
    text: str


def build_entries(books: Sequence[Book], response: SearchResponse) -> List[ResultEntry]:
    """Attach book titles and normalized line text to each search result."""
    lines: Dict[Tuple[str, int, int], Tuple[str, str]] = {}
    for book in books:
        for scanned in normalize_book_lines(book):
            lines.setdefault((book.isbn, scanned.page, scanned.line), (book.title, scanned.text))
    entries = []
    for result in response.results:
        title, text = lines[(result.isbn, result.page, result.line)]
        entries.append(
            ResultEntry(
                isbn=result.isbn,
                title=title,
                page=result.page,
                line=result.line,
                text=text,
            )
        )
    return entries


class BookSearchApp(App):
    CSS = """
    Screen {
        layout: vertical;
    }

    #main {
        height: 1fr;
    }

    #results {
        width: 50%;
        border: tall $primary;
    }

    #preview {
        width: 50%;
        border: tall $primary;
        padding: 0 1;
    }

    #status {
        height: auto;
        border: tall $secondary;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("n", "next_result", "Next"),
        ("N", "previous_result", "Previous"),
    ]

    def __init__(self, response: SearchResponse, entries: List[ResultEntry]) -> None:
        super().__init__()
        self.response = response
        self.entries = entries
        self.matcher: SearchMatcher = compile_matcher(response.search_term)
        self.current_index: Optional[int] = None
        self.results_list = ListView(*self._result_items(), id="results")
        self.preview = Static(id="preview")
        self.status = Static(id="status")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Horizontal(id="main"):
            yield self.results_list
            yield self.preview
        yield self.status
        yield Footer()

    def on_mount(self) -> None:
        self.title = f"booksearch: {self.response.search_term}"
        self.results_list.focus()
        if self.entries:
            self._show_entry(0)
        else:
            self.preview.update("No matches found.")
            self._update_status()

    def _result_items(self) -> List[ListItem]:
        if not self.entries:
            return [ListItem(Label("No matches"))]
        return [
            ListItem(Label(Text(f"{entry.isbn} p{entry.page} l{entry.line}: {entry.text}")))
            for entry in self.entries
        ]

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        index = self.results_list.index
        if index is None or not self.entries:
            return
        self._show_entry(index)

    async def on_key(self, event) -> None:  # type: ignore[override]
        if event.key == "j":
            self.results_list.action_cursor_down()
            event.stop()
        elif event.key == "k":
            self.results_list.action_cursor_up()
            event.stop()

    def action_next_result(self) -> None:
        if self.current_index is None or self.current_index >= len(self.entries) - 1:
            return
        self.results_list.index = self.current_index + 1

    def action_previous_result(self) -> None:
        if self.current_index is None or self.current_index <= 0:
            return
        self.results_list.index = self.current_index - 1

    def _show_entry(self, index: int) -> None:
        if index < 0 or index >= len(self.entries):
            return
        self.current_index = index
        entry = self.entries[index]
        body = Text(f"{entry.title}\n", style="bold")
        body.append(f"ISBN {entry.isbn} | page {entry.page} | line {entry.line}\n\n")
        body.append(highlight_matches(entry.text, self.matcher))
        self.preview.update(body)
        self._update_status()

    def _update_status(self) -> None:
        total = len(self.entries)
        if self.current_index is None:
            self.status.update(f"No results for {self.response.search_term!r}")
            return
        self.status.update(
            f"{self.response.search_term!r} | result {self.current_index + 1}/{total}"
        )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search scanned book text for whole words")
    parser.add_argument("term", help="Search term (case-sensitive, may contain several words)")
    parser.add_argument("path", help="JSON file with scanned book records")
    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of the UI")
    parser.add_argument("--workers", type=int, default=None, help="Search books on N threads")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: $BOOKSEARCH_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def run_search(term: str, scanned_books: Any, workers: Optional[int]) -> Tuple[SearchResponse, List[Book]]:
    response = find_search_term_in_books(term, scanned_books, max_workers=workers)
    books = [Book.from_dict(record) for record in scanned_books]
    return response, books


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    level = args.log_level.upper()
    if level not in LOG_LEVELS:
        print(f"booksearch: unknown log level {args.log_level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format=LOG_FORMAT)
    try:
        response, books = run_search(args.term, load_scanned_books(Path(args.path)), args.workers)
    except (FileNotFoundError, MalformedInputError) as exc:
        logger.debug("Search failed", exc_info=True)
        print(f"booksearch: {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return 0
    app = BookSearchApp(response, build_entries(books, response))
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
