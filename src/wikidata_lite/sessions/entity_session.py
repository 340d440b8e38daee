import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from wikidata_lite.config.settings import settings
from wikidata_lite.errors import (
    ApiError,
    NetworkError,
    NotFoundError,
    ParseError,
    WikidataError,
)
from wikidata_lite.formatting.value_formatter import ValueFormatter
from wikidata_lite.labels.label_cache import LabelCache
from wikidata_lite.models.internal_representation.entity import Entity
from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.models.internal_representation.statements import Claim

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load entity"


class EntityBackend(Protocol):
    def get_entity(self, entity_id: str, languages: Optional[str] = None) -> Entity:
        ...

    def get_random_entity_id(self) -> str:
        ...


class EntityLoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class EntityUiState(BaseModel):
    entity_id: Optional[str] = None
    entity: Optional[Entity] = None
    load_state: EntityLoadState = EntityLoadState.IDLE
    error: Optional[str] = None
    item_labels: dict[str, str] = {}
    property_labels: dict[str, str] = {}

    model_config = ConfigDict(frozen=True)

    @property
    def is_loading(self) -> bool:
        return self.load_state == EntityLoadState.LOADING


class EntitySession:
    """Loads one entity at a time and resolves the labels it references.

    The entity is only published once its labels are resolved; until then
    the state is LOADING with no entity. A new load cancels the previous one.
    """

    def __init__(
        self,
        backend: EntityBackend,
        label_cache: LabelCache,
        language: Optional[str] = None,
        languages: Optional[str] = None,
    ):
        self.backend = backend
        self.label_cache = label_cache
        self.language = language or settings.language
        # None requests every language so label fallback can pick any of them
        self.languages = languages
        self._state = EntityUiState()
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def state(self) -> EntityUiState:
        return self._state

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)

    def _start(self, entity_id: Optional[str], load: Callable[[int], Awaitable[None]]) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._generation += 1
        self._state = EntityUiState(entity_id=entity_id, load_state=EntityLoadState.LOADING)
        self._task = asyncio.get_running_loop().create_task(load(self._generation))
        return self._task

    def load_entity(self, entity_id: str) -> asyncio.Task:
        entity_id = entity_id.strip()
        return self._start(entity_id, lambda generation: self._load(entity_id, generation))

    def load_random_entity(self) -> asyncio.Task:
        return self._start(None, self._load_random)

    def retry(self) -> Optional[asyncio.Task]:
        if not self._state.entity_id:
            return None
        return self.load_entity(self._state.entity_id)

    async def _load_random(self, generation: int) -> None:
        try:
            entity_id = await asyncio.to_thread(self.backend.get_random_entity_id)
        except WikidataError as e:
            self._fail(generation, e)
            return
        if generation != self._generation:
            return
        self._update(entity_id=entity_id)
        await self._load(entity_id, generation)

    async def _load(self, entity_id: str, generation: int) -> None:
        logger.debug(f"Loading entity {entity_id}")
        try:
            entity = await asyncio.to_thread(self.backend.get_entity, entity_id, self.languages)
        except NotFoundError:
            if generation == self._generation:
                logger.info(f"Entity {entity_id} does not exist")
                self._update(load_state=EntityLoadState.NOT_FOUND, entity=None, error=None)
            return
        except WikidataError as e:
            self._fail(generation, e)
            return

        if generation != self._generation:
            return

        property_ids = entity.referenced_property_ids()
        item_ids = entity.referenced_item_ids()
        labels = await asyncio.to_thread(self.label_cache.resolve_labels, property_ids | item_ids)

        if generation != self._generation:
            logger.debug(f"Discarding superseded load of {entity_id}")
            return

        self._update(
            entity=entity,
            load_state=EntityLoadState.LOADED,
            error=None,
            property_labels={pid: labels.get(pid, pid) for pid in property_ids},
            item_labels={qid: labels.get(qid, qid) for qid in item_ids},
        )

    def _fail(self, generation: int, error: WikidataError) -> None:
        if generation != self._generation:
            return
        if isinstance(error, ParseError):
            logger.error(f"Malformed entity payload for {self._state.entity_id}: {error}")
        elif isinstance(error, NetworkError):
            logger.error(f"Network failure loading {self._state.entity_id}: {error}")
        elif isinstance(error, ApiError):
            logger.error(f"API error loading {self._state.entity_id}: {error.code} {error.message}")
        self._update(
            entity=None,
            load_state=EntityLoadState.FAILED,
            error=error.message or LOAD_FAILED_MESSAGE,
        )

    def clear_error(self) -> None:
        self._update(error=None)

    def get_display_label(self, entity_id: str) -> str:
        return self.label_cache.get_display_label(entity_id)

    def format_snak(self, snak: Snak) -> str:
        return ValueFormatter.format_snak(snak, self._state.item_labels, self._state.property_labels)

    def format_claim_value(self, claim: Claim) -> str:
        return self.format_snak(claim.mainsnak)

    async def aclose(self) -> None:
        task = self._task
        self._generation += 1
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
