"""Search lifecycle shared by every user-facing surface.

The controller owns the single in-flight flag. A surface only implements
:class:`SearchView`; all of its mutations happen on the event loop that called
:meth:`SearchController.submit`, once the request resolves.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Protocol

from animesearch.config import DisplaySettings
from animesearch.domain.models import SearchResult
from animesearch.logging import logger
from animesearch.presentation.formatting import (
    format_error,
    format_results,
    format_searching,
    status_for,
)
from animesearch.services.exceptions import InputError, SearchError
from animesearch.services.query import normalize_query

IDLE_STATUS = "Enter an anime name to search"
SEARCHING_STATUS = "Searching..."


class StatusKind(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class SearchView(Protocol):
    def set_trigger_enabled(self, enabled: bool) -> None: ...

    def set_status(self, kind: StatusKind, text: str) -> None: ...

    def set_output(self, text: str) -> None: ...

    def show_input_error(self, message: str) -> None: ...


class SearchBackend(Protocol):
    async def search(self, query: str) -> SearchResult: ...


class SearchController:
    def __init__(
        self,
        service: SearchBackend,
        view: SearchView,
        display: DisplaySettings | None = None,
    ) -> None:
        self._service = service
        self._view = view
        self._display = display or DisplaySettings()
        self._task: asyncio.Task[None] | None = None
        self._generation = 0
        self._status = StatusKind.IDLE
        self._last_result: SearchResult | None = None
        self._view.set_trigger_enabled(True)
        self._set_status(StatusKind.IDLE, IDLE_STATUS)

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def status(self) -> StatusKind:
        return self._status

    @property
    def last_result(self) -> SearchResult | None:
        return self._last_result

    def submit(self, raw_query: str | None) -> asyncio.Task[None] | None:
        """Start a search unless the input is empty or one is already running."""

        try:
            query = normalize_query(raw_query)
        except InputError as exc:
            self._view.show_input_error(str(exc))
            return None

        if self.in_flight:
            logger.info("anime_search_refused", query=query, reason="in_flight")
            return None

        self._generation += 1
        self._view.set_trigger_enabled(False)
        self._set_status(StatusKind.SEARCHING, SEARCHING_STATUS)
        self._view.set_output(format_searching(query))

        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(query, self._generation))
        return self._task

    async def _run(self, query: str, generation: int) -> None:
        try:
            result = await self._service.search(query)
        except SearchError as exc:
            self._complete_failure(generation, exc)
        except Exception as exc:
            logger.exception("anime_search_crashed", query=query)
            self._complete_failure(generation, exc)
        else:
            self._complete_success(generation, query, result)
        finally:
            if generation == self._generation:
                self._view.set_trigger_enabled(True)

    def _complete_success(self, generation: int, query: str, result: SearchResult) -> None:
        if generation != self._generation:
            logger.info("anime_search_stale_result", query=query)
            return
        self._last_result = result
        self._view.set_output(format_results(result, query, self._display))
        kind = StatusKind.SUCCESS if result else StatusKind.EMPTY
        self._set_status(kind, status_for(result))

    def _complete_failure(self, generation: int, exc: BaseException) -> None:
        if generation != self._generation:
            return
        self._set_status(StatusKind.ERROR, f"Search failed: {exc}")
        self._view.set_output(format_error(exc))

    def _set_status(self, kind: StatusKind, text: str) -> None:
        self._status = kind
        self._view.set_status(kind, text)

    def cancel(self) -> bool:
        """Abandon the running search and return the surface to idle.

        Returns ``False`` when nothing was in flight.
        """

        if not self.in_flight:
            return False
        self._generation += 1
        self._task.cancel()
        self._task = None
        self._view.set_trigger_enabled(True)
        self._set_status(StatusKind.IDLE, IDLE_STATUS)
        logger.info("anime_search_cancelled")
        return True

    async def aclose(self) -> None:
        """Wait for a running search so its completion reaches the view."""

        if self._task is not None and not self._task.done():
            await asyncio.gather(self._task, return_exceptions=True)


__all__ = [
    "IDLE_STATUS",
    "SEARCHING_STATUS",
    "SearchBackend",
    "SearchController",
    "SearchView",
    "StatusKind",
]
