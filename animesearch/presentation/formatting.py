"""Plain-text rendering of search results."""

from __future__ import annotations

from animesearch.config import DisplaySettings
from animesearch.domain.models import SearchResult

NO_SYNOPSIS = "No synopsis available"


def wrap_text(text: str | None, width: int = 80, indent: int = 11) -> str | None:
    """Greedy word wrap; continuation lines start with ``indent`` spaces.

    The indent counts towards ``width``. Text that already fits is returned
    untouched, and a word longer than the width is never split.
    """

    if text is None or len(text) <= width:
        return text

    padding = " " * indent
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + len(word) + 1 > width:
            lines.append(current)
            current = f"{padding}{word}"
        elif current:
            current = f"{current} {word}"
        else:
            current = word
    if current:
        lines.append(current)
    return "\n".join(lines)


def format_results(
    result: SearchResult,
    query: str,
    settings: DisplaySettings | None = None,
) -> str:
    settings = settings or DisplaySettings()
    if not result:
        return f"No anime found for: {query}"

    divider = settings.divider_char * settings.divider_length
    parts = [f"Found {len(result)} anime(s) for: {query}", ""]
    for index, record in enumerate(result, start=1):
        parts.append(f"{index}. Title: {record.title}")
        if record.has_synopsis:
            synopsis = wrap_text(
                record.synopsis,
                settings.wrap_width,
                settings.continuation_indent,
            )
        else:
            synopsis = NO_SYNOPSIS
        parts.append(f"Synopsis: {synopsis}")
        parts.append(divider)
        parts.append("")
    return "\n".join(parts) + "\n"


def status_for(result: SearchResult) -> str:
    if not result:
        return "No results found"
    return f"Found {len(result)} result(s)"


def format_searching(query: str) -> str:
    return f"Searching for: {query}\nPlease wait..."


def format_error(exc: BaseException) -> str:
    return f"Error occurred while searching:\n{exc}"


__all__ = [
    "NO_SYNOPSIS",
    "format_error",
    "format_results",
    "format_searching",
    "status_for",
    "wrap_text",
]
