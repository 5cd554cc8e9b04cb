"""Decode Jikan search responses into domain records."""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from animesearch.domain.models import AnimeRecord, SearchResult
from animesearch.logging import logger
from animesearch.services.exceptions import DecodeError


class _SearchEnvelope(BaseModel):
    # Pagination and other top-level keys are ignored.
    data: list[AnimeRecord]


def _describe(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    if any(error["type"] == "json_invalid" for error in errors):
        return "Response body is not valid JSON."
    first = errors[0] if errors else None
    if first is None:
        return "Unexpected response shape."
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"Unexpected response shape at {location}: {first['msg']}"


def decode(raw_body: str | bytes) -> SearchResult:
    """Parse a raw response body into a :class:`SearchResult`.

    Records keep the order of the ``data`` array. An element without a string
    ``title`` fails the whole payload; a missing ``synopsis`` becomes ``None``.
    """

    try:
        envelope = _SearchEnvelope.model_validate_json(raw_body)
    except ValidationError as exc:
        message = _describe(exc)
        logger.warning(
            "anime_response_decode_failed",
            error=message,
            error_count=exc.error_count(),
        )
        raise DecodeError(message) from exc
    return SearchResult(tuple(envelope.data))


__all__ = ["decode"]
