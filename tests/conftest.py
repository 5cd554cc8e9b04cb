"""Shared pytest fixtures and fakes."""

from __future__ import annotations

import pytest

from animesearch.config import get_settings


class RecordingView:
    """SearchView double that keeps every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.trigger_enabled: bool | None = None
        self.status = None
        self.output = ""
        self.input_errors: list[str] = []

    def set_trigger_enabled(self, enabled: bool) -> None:
        self.calls.append(("trigger", enabled))
        self.trigger_enabled = enabled

    def set_status(self, kind, text: str) -> None:
        self.calls.append(("status", kind, text))
        self.status = (kind, text)

    def set_output(self, text: str) -> None:
        self.calls.append(("output", text))
        self.output = text

    def show_input_error(self, message: str) -> None:
        self.calls.append(("input_error", message))
        self.input_errors.append(message)

    def trigger_calls(self) -> list[bool]:
        return [call[1] for call in self.calls if call[0] == "trigger"]


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
