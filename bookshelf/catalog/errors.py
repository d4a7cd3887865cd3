"""Exceptions raised by the catalog fetcher and the book store."""


class FetchError(Exception):
    """The upstream catalog could not be reached or answered with an error."""


class CatalogDecodeError(FetchError):
    """The upstream catalog answered, but the payload is not a book envelope."""


class BookNotFound(LookupError):
    """No book with the requested identifier exists in the working set."""

    def __init__(self, book_id: int):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id
