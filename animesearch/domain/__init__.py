from animesearch.domain.models import AnimeRecord, SearchResult

__all__ = ["AnimeRecord", "SearchResult"]
