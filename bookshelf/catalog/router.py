"""
Route definitions for the catalogue API.

Endpoints:
- GET    /             : rendered listing of the working set (seeds it on first use)
- POST   /add          : add a book, identifier assigned by the store
- PUT    /update?id=N  : replace book N
- DELETE /delete?id=N  : remove book N
- *      /reset        : restore the working set to the fetched catalogue

Request bodies are read raw and decoded as JSON regardless of the
Content-Type header. Handlers are plain ``def`` functions: FastAPI
runs them in its threadpool and ``BookStore`` serialises them with its lock. Domain
errors (``FetchError``, ``BookNotFound``) are raised through to the
exception handlers registered in ``main.create_app``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import TemplateError
from pydantic import ValidationError

from .schemas import Book
from .store import BookStore
from .views import ListingRenderer


logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])

RESET_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_store(request: Request) -> BookStore:
    return request.app.state.store


def get_renderer(request: Request) -> ListingRenderer:
    return request.app.state.renderer


@router.get("/", response_class=HTMLResponse)
def list_books(
    store: BookStore = Depends(get_store),
    renderer: ListingRenderer = Depends(get_renderer),
) -> Response:
    books = store.list_books()
    try:
        page = renderer.render(books)
    except TemplateError as exc:
        logger.error("Error rendering listing: %s", exc)
        return PlainTextResponse(
            f"Error rendering template: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return HTMLResponse(page)


async def read_body(request: Request) -> bytes:
    return await request.body()


def parse_book(raw: bytes) -> Book:
    """Decode a request body as a ``Book`` whatever its Content-Type."""
    try:
        return Book.model_validate_json(raw)
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_url=False)]
        ) from exc


@router.post("/add", response_model=Book)
def add_book(raw: bytes = Depends(read_body), store: BookStore = Depends(get_store)) -> Book:
    return store.insert(parse_book(raw))


@router.put("/update", response_model=Book)
def update_book(
    raw: bytes = Depends(read_body),
    book_id: int = Query(..., alias="id"),
    store: BookStore = Depends(get_store),
) -> Book:
    # The id is validated by FastAPI before the body is decoded here.
    return store.update(book_id, parse_book(raw))


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int = Query(..., alias="id"),
    store: BookStore = Depends(get_store),
) -> Response:
    store.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("/reset", methods=RESET_METHODS, status_code=status.HTTP_204_NO_CONTENT)
def reset_books(store: BookStore = Depends(get_store)) -> Response:
    store.reset()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
