from typing import List

from bookshelf.catalog.errors import FetchError
from bookshelf.catalog.schemas import Book


def make_book(book_id: int, title: str, **fields) -> Book:
    return Book(id=book_id, title=title, author=fields.pop("author", f"Author of {title}"), **fields)


def sample_books() -> List[Book]:
    return [
        make_book(1, "Dune", genre="Science fiction"),
        make_book(2, "Emma", genre="Romance"),
        make_book(3, "Ulysses", genre="Modernism"),
    ]


class FakeFetcher:
    """Callable fetcher that records calls and can fail a number of times first."""

    def __init__(self, books: List[Book] | None = None, failures: int = 0):
        self.books = sample_books() if books is None else books
        self.failures = failures
        self.calls = 0

    def __call__(self) -> List[Book]:
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise FetchError("unexpected status code: 503")
        return [b.model_copy() for b in self.books]
