"""Query normalization and request URL construction for the Jikan search."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from animesearch.config import JikanSettings
from animesearch.services.exceptions import InputError

EMPTY_QUERY_MESSAGE = "Please enter an anime name to search."


def normalize_query(raw: str | None) -> str:
    """Trim user input, rejecting empty or whitespace-only queries."""

    query = (raw or "").strip()
    if not query:
        raise InputError(EMPTY_QUERY_MESSAGE)
    return query


def build_request_url(query: str, settings: JikanSettings | None = None) -> str:
    """Return the absolute search URL for an already normalized query.

    The query is encoded as a URL query component (UTF-8, spaces as ``%20``).
    The field list keeps its literal commas.
    """

    settings = settings or JikanSettings()
    params = urlencode(
        {"q": query, "limit": settings.result_limit},
        quote_via=quote,
    )
    fields = ",".join(quote(field, safe="") for field in settings.fields)
    return f"{settings.search_endpoint}?{params}&fields={fields}"


__all__ = ["EMPTY_QUERY_MESSAGE", "build_request_url", "normalize_query"]
