from wikidata_lite.sessions.entity_session import (
    EntityBackend,
    EntityLoadState,
    EntitySession,
    EntityUiState,
)

__all__ = [
    "EntityBackend",
    "EntityLoadState",
    "EntitySession",
    "EntityUiState",
]
