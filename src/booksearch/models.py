from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class ScannedLine:
    page: int
    line: int
    text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScannedLine:
        return cls(page=data["page"], line=data["line"], text=data["text"])

    def to_dict(self) -> Dict[str, Any]:
        return {"page": self.page, "line": self.line, "text": self.text}


@dataclass
class Book:
    title: str
    isbn: str
    content: List[ScannedLine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Book:
        return cls(
            title=data["title"],
            isbn=data["isbn"],
            content=[ScannedLine.from_dict(item) for item in data["content"]],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "isbn": self.isbn,
            "content": [line.to_dict() for line in self.content],
        }


@dataclass(frozen=True)
class SearchResult:
    isbn: str
    page: int
    line: int

    def to_dict(self) -> Dict[str, Any]:
        return {"isbn": self.isbn, "page": self.page, "line": self.line}


@dataclass
class SearchResponse:
    search_term: str
    results: List[SearchResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "searchTerm": self.search_term,
            "results": [result.to_dict() for result in self.results],
        }
