"""Pydantic models shared across service and presentation layers."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, RootModel


class AnimeRecord(BaseModel):
    """One decoded search hit. Unknown API fields are dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    synopsis: str | None = None

    @property
    def has_synopsis(self) -> bool:
        return bool(self.synopsis and self.synopsis.strip())


class SearchResult(RootModel[tuple[AnimeRecord, ...]]):
    """Ordered records of a single search, in API order."""

    model_config = ConfigDict(frozen=True)

    root: tuple[AnimeRecord, ...] = ()

    def __iter__(self) -> Iterator[AnimeRecord]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> AnimeRecord:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return bool(self.root)


__all__ = [
    "AnimeRecord",
    "SearchResult",
]
