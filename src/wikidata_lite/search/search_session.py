import asyncio
import logging
from enum import Enum
from typing import Any, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from wikidata_lite.config.settings import settings
from wikidata_lite.errors import WikidataError
from wikidata_lite.models.internal_representation.search import SearchInfo, SearchResult
from wikidata_lite.parsers.search_parser import parse_search_response

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Search failed. Please check your internet connection."


class SearchBackend(Protocol):
    def search_entities(
        self,
        query: str,
        language: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
        type: str = "item",
    ) -> dict[str, Any]:
        ...


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class SearchUiState(BaseModel):
    query: str = ""
    suggestions: list[SearchResult] = []
    suggestion_state: SearchState = SearchState.IDLE
    suggestions_error: Optional[str] = None
    results: list[SearchResult] = []
    search_state: SearchState = SearchState.IDLE
    offset: int = 0
    search_info: Optional[SearchInfo] = None
    search_continue: Optional[int] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_searching(self) -> bool:
        return self.search_state == SearchState.LOADING

    @property
    def is_suggestions_loading(self) -> bool:
        return self.suggestion_state == SearchState.LOADING


async def _cancel(task: Optional[asyncio.Task]) -> None:
    if task is None or task.done():
        return
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass


class SearchSession:
    """Live suggestions and explicit paged search over ``wbsearchentities``.

    Must be driven from a running event loop. Each stream (suggestions,
    search) holds at most one task; starting a new request cancels the
    previous task and bumps the stream's generation, so a superseded
    response can never reach the state.
    """

    def __init__(
        self,
        backend: SearchBackend,
        language: Optional[str] = None,
        suggestion_delay: Optional[float] = None,
        suggestion_limit: Optional[int] = None,
        page_size: Optional[int] = None,
        search_type: str = "item",
    ):
        self.backend = backend
        self.language = language or settings.language
        self.suggestion_delay = settings.suggestion_delay if suggestion_delay is None else suggestion_delay
        self.suggestion_limit = suggestion_limit or settings.suggestion_limit
        self.page_size = page_size or settings.search_page_size
        self.search_type = search_type
        self._state = SearchUiState()
        self._suggestion_task: Optional[asyncio.Task] = None
        self._suggestion_generation = 0
        self._search_task: Optional[asyncio.Task] = None
        self._search_generation = 0

    @property
    def state(self) -> SearchUiState:
        return self._state

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)

    def _invalidate_suggestions(self) -> int:
        if self._suggestion_task is not None and not self._suggestion_task.done():
            self._suggestion_task.cancel()
        self._suggestion_task = None
        self._suggestion_generation += 1
        return self._suggestion_generation

    def _invalidate_search(self) -> int:
        if self._search_task is not None and not self._search_task.done():
            self._search_task.cancel()
        self._search_task = None
        self._search_generation += 1
        return self._search_generation

    def update_query(self, query: str) -> Optional[asyncio.Task]:
        """Record a keystroke and schedule a debounced suggestion request"""
        self._update(query=query)
        generation = self._invalidate_suggestions()

        if not query.strip():
            self._update(suggestions=[], suggestion_state=SearchState.IDLE, suggestions_error=None)
            return None

        self._update(suggestion_state=SearchState.LOADING)
        self._suggestion_task = asyncio.get_running_loop().create_task(
            self._fetch_suggestions(query, generation)
        )
        return self._suggestion_task

    async def _fetch_suggestions(self, query: str, generation: int) -> None:
        await asyncio.sleep(self.suggestion_delay)
        logger.debug(f"Fetching suggestions for {query!r}")

        try:
            body = await asyncio.to_thread(
                self.backend.search_entities,
                query,
                language=self.language,
                offset=0,
                limit=self.suggestion_limit,
                type=self.search_type,
            )
            response = parse_search_response(body)
        except WikidataError as e:
            if generation != self._suggestion_generation:
                return
            logger.warning(f"Suggestion request for {query!r} failed: {e}")
            self._update(suggestions=[], suggestion_state=SearchState.FAILURE, suggestions_error=e.message)
            return

        if generation != self._suggestion_generation:
            logger.debug(f"Discarding stale suggestions for {query!r}")
            return
        self._update(suggestions=response.search, suggestion_state=SearchState.SUCCESS, suggestions_error=None)

    def search(self, offset: int = 0) -> Optional[asyncio.Task]:
        """Explicit search for the current query at ``offset``, not debounced"""
        query = self._state.query.strip()
        generation = self._invalidate_search()

        if not query:
            self._update(
                results=[],
                search_info=None,
                search_continue=None,
                search_state=SearchState.IDLE,
                offset=0,
                error=None,
            )
            return None

        offset = max(0, offset)
        self._invalidate_suggestions()
        self._update(
            suggestions=[],
            suggestion_state=SearchState.IDLE,
            search_state=SearchState.LOADING,
            offset=offset,
            error=None,
        )
        self._search_task = asyncio.get_running_loop().create_task(self._run_search(query, offset, generation))
        return self._search_task

    def submit(self, query: str) -> Optional[asyncio.Task]:
        """Set the query and search from the first page"""
        self._update(query=query)
        return self.search(0)

    async def _run_search(self, query: str, offset: int, generation: int) -> None:
        logger.debug(f"Searching {query!r} at offset {offset}")
        try:
            body = await asyncio.to_thread(
                self.backend.search_entities,
                query,
                language=self.language,
                offset=offset,
                limit=self.page_size,
                type=self.search_type,
            )
            response = parse_search_response(body)
        except WikidataError as e:
            if generation != self._search_generation:
                return
            logger.error(f"Search for {query!r} failed: {e}")
            self._update(
                results=[],
                search_info=None,
                search_continue=None,
                search_state=SearchState.FAILURE,
                error=e.message,
            )
            return

        if generation != self._search_generation:
            logger.debug(f"Discarding stale search results for {query!r}")
            return

        if not response.success:
            logger.error(f"Search for {query!r} returned no success indicator")
            self._update(
                results=[],
                search_info=None,
                search_continue=None,
                search_state=SearchState.FAILURE,
                error=SEARCH_FAILED_MESSAGE,
            )
            return

        self._update(
            results=response.search,
            search_info=response.searchinfo,
            search_continue=response.search_continue,
            search_state=SearchState.SUCCESS,
            error=None,
        )

    def load_more(self) -> Optional[asyncio.Task]:
        return self.search(self._state.offset + self.page_size)

    def previous_page(self) -> Optional[asyncio.Task]:
        return self.search(max(0, self._state.offset - self.page_size))

    def clear_suggestions(self) -> None:
        self._invalidate_suggestions()
        self._update(suggestions=[], suggestion_state=SearchState.IDLE)

    def clear_error(self) -> None:
        self._update(error=None)

    async def aclose(self) -> None:
        suggestion_task, search_task = self._suggestion_task, self._search_task
        self._invalidate_suggestions()
        self._invalidate_search()
        await _cancel(suggestion_task)
        await _cancel(search_task)
