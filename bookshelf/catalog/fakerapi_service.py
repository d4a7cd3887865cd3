"""
FakerAPI integration for the catalogue.

The service seeds its in-memory collection from the free, anonymous
``https://fakerapi.it/api/v1/books`` endpoint. This module exposes a
single function:

* ``fetch_books()`` — issue one GET against the configured catalog URL
  and return the ``data`` list of the JSON envelope as ``Book``
  instances.

Nothing is cached or retried here: the caller (``store.BookStore``)
decides when to fetch, and a failed fetch simply raises so the next
request can try again. Only the Python standard library is used for
the HTTP request.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import List, Optional

from pydantic import ValidationError

from ..settings import settings
from .errors import CatalogDecodeError, FetchError
from .schemas import Book, CatalogResponse


logger = logging.getLogger(__name__)

_HEADERS = {
    'User-Agent': (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
        'AppleWebKit/537.36 (KHTML, like Gecko) '
        'Chrome/115.0 Safari/537.36'
    ),
    'Accept': 'application/json',
}


def _http_get_json(url: str, timeout: Optional[float] = None) -> object:
    """Perform an HTTP GET and return the parsed JSON body.

    Raises ``FetchError`` when the request fails or the remote does
    not answer 200, and ``CatalogDecodeError`` when the body is not
    valid JSON. ``timeout`` is only handed to the transport when set.
    """
    request = urllib.request.Request(url, headers=_HEADERS)
    kwargs = {}
    if timeout is not None:
        kwargs['timeout'] = timeout
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            if response.status != 200:
                logger.warning("Catalog request to %s returned status %s", url, response.status)
                raise FetchError(f"unexpected status code: {response.status}")
            raw = response.read()
    except urllib.error.HTTPError as exc:
        logger.warning("Catalog request to %s returned status %s", url, exc.code)
        raise FetchError(f"unexpected status code: {exc.code}") from exc
    except (urllib.error.URLError, OSError) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise FetchError(str(exc)) from exc
    try:
        return json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("Catalog response from %s is not JSON: %s", url, exc)
        raise CatalogDecodeError(str(exc)) from exc


def fetch_books(url: Optional[str] = None, timeout: Optional[float] = None) -> List[Book]:
    """Fetch the upstream catalogue and return its books verbatim.

    Parameters
    ----------
    url : Optional[str]
        Endpoint to query. Defaults to ``settings.CATALOG_URL``.
    timeout : Optional[float]
        Socket timeout in seconds. Defaults to
        ``settings.FETCH_TIMEOUT``; when neither is set the transport
        default applies.

    Returns
    -------
    List[Book]
        The ``data`` list of the upstream envelope, in upstream order.
    """
    url = url or settings.CATALOG_URL
    if timeout is None:
        timeout = settings.FETCH_TIMEOUT
    logger.info("Fetching book catalogue from %s", url)
    payload = _http_get_json(url, timeout)
    try:
        envelope = CatalogResponse.model_validate(payload)
    except ValidationError as exc:
        logger.error("Catalog response from %s has an unexpected shape: %s", url, exc)
        raise CatalogDecodeError(str(exc)) from exc
    logger.info("Fetched %d books from %s", len(envelope.data), url)
    return envelope.data
