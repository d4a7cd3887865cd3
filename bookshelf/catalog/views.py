"""Server-side rendering of the book listing page."""

from __future__ import annotations

from typing import List

from fastapi.templating import Jinja2Templates

from ..settings import settings
from .schemas import Book


class ListingRenderer:
    """Render the working set through ``index.html``.

    Template errors (missing file, syntax or runtime errors) propagate
    as ``jinja2`` exceptions; the router turns them into a 500.
    """

    template_name = "index.html"

    def __init__(self, directory: str | None = None):
        self.templates = Jinja2Templates(directory=directory or settings.TEMPLATES_DIR)

    def render(self, books: List[Book]) -> str:
        template = self.templates.get_template(self.template_name)
        return template.render(books=books)
