import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from wikidata_lite.errors import NotFoundError
from wikidata_lite.parsers import parse_entity

TEST_DATA_JSON_DIR = Path(__file__).parent.parent / "test_data" / "json"


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level_str = os.getenv("TEST_LOG_LEVEL", "INFO")
    log_level = logging.DEBUG if log_level_str == "DEBUG" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


def load_json(name: str) -> dict[str, Any]:
    with open(TEST_DATA_JSON_DIR / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def q42_response() -> dict[str, Any]:
    """wbgetentities response for Q42"""
    return load_json("entities/Q42.json")


@pytest.fixture
def q42_json(q42_response: dict[str, Any]) -> dict[str, Any]:
    return q42_response["entities"]["Q42"]


@pytest.fixture
def missing_response() -> dict[str, Any]:
    return load_json("entities/Q99999999.json")


class FakeWikidataClient:
    """In-memory stand-in for WikidataClient recording every call"""

    def __init__(
        self,
        entities: Optional[dict[str, dict[str, Any]]] = None,
        labels: Optional[dict[str, str]] = None,
        search: Optional[Callable[..., dict[str, Any]]] = None,
    ):
        self.entities = entities or {}
        self.labels = labels or {}
        self.search = search
        self.label_calls: list[list[str]] = []
        self.entity_calls: list[str] = []
        self.search_calls: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    def get_labels(self, ids, language=None):
        with self._lock:
            self.label_calls.append(list(ids))
        return {entity_id: self.labels.get(entity_id, entity_id) for entity_id in ids}

    def get_entity(self, entity_id, languages=None):
        self.entity_calls.append(entity_id)
        if entity_id not in self.entities:
            raise NotFoundError(entity_id)
        entity = parse_entity(self.entities[entity_id], entity_id)
        if entity.missing:
            raise NotFoundError(entity_id)
        return entity

    def get_random_entity_id(self):
        return next(iter(self.entities))

    def search_entities(self, query, language=None, offset=0, limit=50, type="item"):
        call = {"query": query, "language": language, "offset": offset, "limit": limit, "type": type}
        with self._lock:
            self.search_calls.append(call)
        if self.search is not None:
            return self.search(**call)
        return {
            "success": 1,
            "search": [{"id": f"Q{offset + 1}", "label": query}],
            "searchinfo": {"search": query},
        }


@pytest.fixture
def fake_client(q42_json: dict[str, Any]) -> FakeWikidataClient:
    return FakeWikidataClient(
        entities={"Q42": q42_json},
        labels={
            "P31": "instance of",
            "P106": "occupation",
            "Q5": "human",
            "Q350": "Cambridge",
            "Q11573": "metre",
        },
    )
