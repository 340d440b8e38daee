from wikidata_lite.search.search_session import (
    SearchBackend,
    SearchSession,
    SearchState,
    SearchUiState,
)

__all__ = [
    "SearchBackend",
    "SearchSession",
    "SearchState",
    "SearchUiState",
]
