import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional, Protocol

from wikidata_lite.api.client import MAX_IDS_PER_REQUEST
from wikidata_lite.config.settings import settings

logger = logging.getLogger(__name__)


class LabelSource(Protocol):
    """Anything able to fetch labels for one batch of ids"""

    def get_labels(self, ids: Iterable[str], language: Optional[str] = None) -> dict[str, str]:
        ...


class LabelCache:
    """Session-wide id -> label cache for properties and items.

    Construct once per app session and pass it by reference to everything
    that renders labels. Entries are never evicted. Ids whose batch failed
    resolve to themselves for that call and are not cached.
    """

    def __init__(
        self,
        source: LabelSource,
        language: Optional[str] = None,
        batch_size: Optional[int] = None,
        max_workers: Optional[int] = None,
    ):
        self.source = source
        self.language = language or settings.language
        self.batch_size = max(1, min(batch_size or settings.label_batch_size, MAX_IDS_PER_REQUEST))
        self.max_workers = max_workers or settings.label_workers
        self._labels: dict[str, str] = {}
        self._lock = threading.Lock()

    def __contains__(self, entity_id: str) -> bool:
        with self._lock:
            return entity_id in self._labels

    def __len__(self) -> int:
        with self._lock:
            return len(self._labels)

    def cached_ids(self) -> set[str]:
        with self._lock:
            return set(self._labels)

    def get_display_label(self, entity_id: str) -> str:
        with self._lock:
            return self._labels.get(entity_id) or entity_id

    def resolve_labels(self, ids: Iterable[str]) -> dict[str, str]:
        requested = list(dict.fromkeys(entity_id for entity_id in ids if entity_id))

        with self._lock:
            resolved = {entity_id: self._labels[entity_id] for entity_id in requested if entity_id in self._labels}
        uncached = [entity_id for entity_id in requested if entity_id not in resolved]

        if not uncached:
            return resolved

        batches = [uncached[i:i + self.batch_size] for i in range(0, len(uncached), self.batch_size)]
        logger.info(f"Resolving {len(uncached)} labels in {len(batches)} batch(es), {len(resolved)} cached")

        if len(batches) == 1:
            resolved.update(self._resolve_batch(batches[0], 1))
        else:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(batches))) as executor:
                futures = [
                    executor.submit(self._resolve_batch, batch, number)
                    for number, batch in enumerate(batches, start=1)
                ]
                for future in as_completed(futures):
                    resolved.update(future.result())

        return {entity_id: resolved.get(entity_id, entity_id) for entity_id in requested}

    def _resolve_batch(self, batch: list[str], number: int) -> dict[str, str]:
        try:
            fetched = self.source.get_labels(batch, language=self.language)
        except Exception as e:
            logger.warning(f"Label batch {number} ({len(batch)} ids) failed, using ids: {e}")
            return {entity_id: entity_id for entity_id in batch}

        labels = {entity_id: fetched.get(entity_id) or entity_id for entity_id in batch}
        with self._lock:
            self._labels.update(labels)
        logger.debug(f"Cached {len(labels)} labels from batch {number}")
        return labels
