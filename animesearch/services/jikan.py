"""Jikan anime search over an injected HTTP client."""

from __future__ import annotations

import httpx

from animesearch.config import JikanSettings
from animesearch.domain.models import SearchResult
from animesearch.logging import logger
from animesearch.services.decoder import decode
from animesearch.services.exceptions import TransportError
from animesearch.services.query import build_request_url, normalize_query


def create_http_client(settings: JikanSettings | None = None, **kwargs) -> httpx.AsyncClient:
    """Build the application-owned client. The caller is responsible for closing it."""

    settings = settings or JikanSettings()
    kwargs.setdefault("timeout", settings.request_timeout_seconds)
    kwargs.setdefault("follow_redirects", True)
    return httpx.AsyncClient(**kwargs)


class AnimeSearchService:
    """Runs one Jikan search per call; no caching and no retries."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: JikanSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or JikanSettings()

    async def search(self, query: str) -> SearchResult:
        query = normalize_query(query)
        url = build_request_url(query, self._settings)
        logger.info("anime_search_started", query=query, url=url)

        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            detail = exc.response.reason_phrase if exc.response is not None else str(exc)
            logger.warning("anime_search_failed", query=query, status_code=status_code)
            raise TransportError(
                f"Search request failed ({status_code}): {detail}",
                status_code=status_code,
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("anime_search_failed", query=query, error="timeout")
            raise TransportError("Search request timed out.") from exc
        except httpx.RequestError as exc:
            logger.warning("anime_search_failed", query=query, error=str(exc))
            raise TransportError(f"Search request failed: {exc}") from exc

        result = decode(response.content)
        logger.info("anime_search_completed", query=query, result_count=len(result))
        return result


__all__ = ["AnimeSearchService", "create_http_client"]
