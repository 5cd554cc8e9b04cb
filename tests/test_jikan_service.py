"""Tests for the Jikan search service over a mocked transport."""

from __future__ import annotations

import httpx
import pytest

from animesearch.config import JikanSettings
from animesearch.services.exceptions import DecodeError, InputError, TransportError
from animesearch.services.jikan import AnimeSearchService, create_http_client


@pytest.mark.asyncio
async def test_search_returns_decoded_records():
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        assert request.method == "GET"
        return httpx.Response(
            200,
            json={
                "pagination": {"last_visible_page": 1},
                "data": [
                    {"mal_id": 20, "title": "Naruto", "synopsis": "A ninja."},
                    {"mal_id": 1735, "title": "Naruto: Shippuuden"},
                ],
            },
        )

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        result = await service.search("  Naruto ")

    assert [record.title for record in result] == ["Naruto", "Naruto: Shippuuden"]
    assert result[0].synopsis == "A ninja."
    assert result[1].synopsis is None
    assert len(requested) == 1
    url = requested[0]
    assert url.host == "api.jikan.moe"
    assert url.path == "/v4/anime"
    assert url.params["q"] == "Naruto"
    assert url.params["limit"] == "5"
    assert url.params["fields"] == "title,synopsis"


@pytest.mark.asyncio
async def test_search_rejects_blank_query_without_request():
    calls = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json={"data": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        with pytest.raises(InputError):
            await service.search("   ")

    assert calls == 0


@pytest.mark.asyncio
async def test_search_maps_http_status_to_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"status": 429, "message": "Too many requests"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        with pytest.raises(TransportError) as excinfo:
            await service.search("Naruto")

    assert excinfo.value.status_code == 429
    assert "429" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_search_maps_network_failure_to_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        with pytest.raises(TransportError) as excinfo:
            await service.search("Naruto")

    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)


@pytest.mark.asyncio
async def test_search_maps_timeout_to_transport_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        with pytest.raises(TransportError) as excinfo:
            await service.search("Naruto")

    assert str(excinfo.value) == "Search request timed out."


@pytest.mark.asyncio
async def test_search_surfaces_decode_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text='{"data": [')

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client)
        with pytest.raises(DecodeError):
            await service.search("Naruto")


@pytest.mark.asyncio
async def test_search_uses_configured_endpoint_and_limit():
    requested: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json={"data": []})

    settings = JikanSettings(base_url="https://mirror.example/v4/", result_limit=2)
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = AnimeSearchService(client, settings=settings)
        result = await service.search("Monster")

    assert len(result) == 0
    assert requested == ["https://mirror.example/v4/anime?q=Monster&limit=2&fields=title,synopsis"]


@pytest.mark.asyncio
async def test_create_http_client_applies_timeout():
    settings = JikanSettings(request_timeout_seconds=3)
    client = create_http_client(settings)
    try:
        assert client.timeout.read == 3
        assert client.follow_redirects is True
    finally:
        await client.aclose()
