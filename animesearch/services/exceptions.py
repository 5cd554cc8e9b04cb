"""Domain-specific exceptions."""


class SearchError(Exception):
    pass


class InputError(SearchError):
    """The query was empty or whitespace only; nothing was sent."""


class TransportError(SearchError):
    """The request failed before a usable response body arrived."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SearchError):
    """The response body was not the expected JSON envelope."""
