"""Application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
import threading
from typing import Awaitable, Callable, Sequence, TextIO

from animesearch.config import get_settings
from animesearch.logging import configure_logging, logger
from animesearch.presentation.console import ConsoleView
from animesearch.presentation.controller import SearchController, StatusKind
from animesearch.services.jikan import AnimeSearchService, create_http_client

PROMPT = "Search Anime: "
QUIT_COMMAND = ":q"

EXIT_OK = 0
EXIT_SEARCH_FAILED = 1
EXIT_NO_INPUT = 2
EXIT_INTERRUPTED = 130

LineReader = Callable[[str], Awaitable[str]]


async def _read_line(prompt: str) -> str:
    """Read one line on a daemon thread so Ctrl-C never waits on ``input()``."""

    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def _deliver(result: str | None, exc: BaseException | None) -> None:
        if future.done():
            return
        if exc is not None:
            future.set_exception(exc)
        else:
            future.set_result(result)

    def _worker() -> None:
        try:
            line, error = input(prompt), None
        except Exception as exc:
            line, error = None, exc
        try:
            loop.call_soon_threadsafe(_deliver, line, error)
        except RuntimeError:
            # Loop already closed after an interrupt.
            pass

    threading.Thread(target=_worker, name="animesearch-input", daemon=True).start()
    return await future


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="animesearch",
        description="Search anime titles on Jikan and print their synopses.",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Anime name to search for. Starts an interactive prompt when omitted.",
    )
    parser.add_argument("--no-colour", action="store_true", help="Disable ANSI colours.")
    return parser


async def _search_once(controller: SearchController, query: str) -> int:
    task = controller.submit(query)
    if task is None:
        return EXIT_NO_INPUT
    await task
    if controller.status is StatusKind.ERROR:
        return EXIT_SEARCH_FAILED
    return EXIT_OK


async def _interactive(controller: SearchController, read_line: LineReader) -> int:
    while True:
        try:
            line = await read_line(PROMPT)
        except EOFError:
            break
        if line.strip() == QUIT_COMMAND:
            break
        task = controller.submit(line)
        if task is not None:
            await task
    return EXIT_OK


async def main(
    argv: Sequence[str] | None = None,
    *,
    stream: TextIO | None = None,
    read_line: LineReader | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(getattr(logging, settings.log_level), stream=sys.stderr)

    view = ConsoleView(stream, colour=False if args.no_colour else None)
    logger.info("anime_search_app_starting", environment=settings.environment)

    async with create_http_client(settings.jikan) as http_client:
        service = AnimeSearchService(http_client, settings=settings.jikan)
        controller = SearchController(service, view, display=settings.display)
        try:
            if args.query:
                return await _search_once(controller, " ".join(args.query))
            return await _interactive(controller, read_line or _read_line)
        finally:
            controller.cancel()


def run() -> None:
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        # The prompt thread may still hold stdin; skip interpreter shutdown.
        sys.stdout.flush()
        sys.stderr.flush()
        os._exit(EXIT_INTERRUPTED)
    sys.exit(code)


if __name__ == "__main__":
    run()
