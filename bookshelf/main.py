# bookshelf/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import BookStore, ListingRenderer, catalog_router
from .catalog.errors import BookNotFound, FetchError
from .settings import Settings, settings as default_settings


logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FetchError)
    async def fetch_error_handler(request: Request, exc: FetchError):
        logger.warning("Catalog fetch failed for %s: %s", request.url.path, exc)
        return PlainTextResponse(
            f"Failed to fetch books: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(BookNotFound)
    async def not_found_handler(request: Request, exc: BookNotFound):
        return PlainTextResponse("Book not found", status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # The id query parameter is checked before the body, as a client would expect.
        if any(err.get("loc", ("",))[0] == "query" for err in exc.errors()):
            message = "Invalid book ID"
        else:
            message = f"Invalid input: {_describe_validation_error(exc)}"
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = "Invalid request method"
        else:
            message = str(exc.detail)
        return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


def create_app(
    store: Optional[BookStore] = None,
    renderer: Optional[ListingRenderer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around one ``BookStore`` shared by every handler."""
    settings = settings or default_settings

    app = FastAPI(
        title="Bookshelf",
        description=(
            "In-memory copy of the FakerAPI book catalogue with add, update, "
            "delete and reset endpoints and a server-rendered listing page."
        ),
        version="1.0.0",
    )
    app.state.store = store or BookStore()
    app.state.renderer = renderer or ListingRenderer(settings.TEMPLATES_DIR)

    _register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
    app.include_router(catalog_router)
    return app


app = create_app()
