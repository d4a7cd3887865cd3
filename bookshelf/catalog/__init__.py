"""
Catalog package for the bookshelf service.

It holds the book schema, the fetcher for the upstream FakerAPI
catalogue, the lock-guarded in-memory ``BookStore`` and the routes
that list, add, update, delete and reset books.
"""

from .router import router as catalog_router  # noqa: F401
from .store import BookStore  # noqa: F401
from .views import ListingRenderer  # noqa: F401
