import json
import logging
from typing import Any, Iterable, Optional

import requests

from wikidata_lite.api.edit_values import build_snak_value, build_value_snak
from wikidata_lite.api.models import ClientConfig
from wikidata_lite.config.settings import settings
from wikidata_lite.errors import ApiError, NetworkError, NotFoundError, ParseError
from wikidata_lite.models.internal_representation.entity import Entity
from wikidata_lite.parsers.entity_parser import parse_entity

logger = logging.getLogger(__name__)

ENTITY_PROPS = "labels|descriptions|aliases|claims|sitelinks"
NO_SUCH_ENTITY = "no-such-entity"
# Server-side limit on ids per wbgetentities request
MAX_IDS_PER_REQUEST = 50


class WikidataClient:
    """Thin wrapper over the Wikidata Action API (``w/api.php``).

    Every call returns the decoded JSON body or raises one of
    NetworkError, ParseError, ApiError, NotFoundError. Authenticated
    calls rely on cookies already present on the injected session.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or settings.to_client_config()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        params = {key: value for key, value in params.items() if value is not None}
        params["format"] = "json"
        action = params.get("action")
        logger.debug(f"  → {method} {self.config.api_url} action={action}")

        try:
            if method == "POST":
                response = self.session.post(self.config.api_url, data=params, timeout=self.config.timeout)
            else:
                response = self.session.get(self.config.api_url, params=params, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"Network error during {action}: {e}")
            raise NetworkError(f"Network error: {e}") from e

        logger.debug(f"  ← {response.status_code} {response.reason}")
        if not response.ok:
            raise NetworkError(f"HTTP {response.status_code}: {response.text[:200]}", status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Malformed JSON in {action} response: {e}")
            raise ParseError(f"Malformed response for {action}") from e

        if not isinstance(body, dict):
            raise ParseError(f"Unexpected {type(body).__name__} response for {action}")

        if body.get("error"):
            error = ApiError.from_json(body["error"])
            logger.error(f"API error during {action}: {error.code} {error.message}")
            raise error

        return body

    def search_entities(
        self,
        query: str,
        language: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
        type: str = "item",
    ) -> dict[str, Any]:
        language = language or settings.language
        return self._request(
            "GET",
            {
                "action": "wbsearchentities",
                "search": query,
                "language": language,
                "uselang": language,
                "type": type,
                "limit": limit,
                "continue": offset or None,
            },
        )

    def search_properties(
        self, query: str, language: Optional[str] = None, offset: int = 0, limit: int = 20
    ) -> dict[str, Any]:
        return self.search_entities(query, language=language, offset=offset, limit=limit, type="property")

    def get_entities(
        self, ids: Iterable[str], languages: Optional[str] = None, props: str = ENTITY_PROPS
    ) -> dict[str, Any]:
        ids = list(ids)
        if len(ids) > MAX_IDS_PER_REQUEST:
            raise ValueError(f"At most {MAX_IDS_PER_REQUEST} ids per request, got {len(ids)}")
        return self._request(
            "GET",
            {"action": "wbgetentities", "ids": "|".join(ids), "languages": languages, "props": props},
        )

    def get_entity(self, entity_id: str, languages: Optional[str] = None) -> Entity:
        try:
            body = self.get_entities([entity_id], languages=languages)
        except ApiError as e:
            if e.code == NO_SUCH_ENTITY:
                raise NotFoundError(entity_id) from e
            raise
        return self._single_entity(body, entity_id)

    def get_entity_by_title(self, site: str, title: str, languages: Optional[str] = None) -> Entity:
        body = self._request(
            "GET",
            {
                "action": "wbgetentities",
                "sites": site,
                "titles": title,
                "languages": languages,
                "props": ENTITY_PROPS,
            },
        )
        return self._single_entity(body, f"{site}:{title}")

    @staticmethod
    def _single_entity(body: dict[str, Any], requested: str) -> Entity:
        entities = body.get("entities")
        if not isinstance(entities, dict):
            raise ParseError("Response has no 'entities' object")
        if not entities:
            raise NotFoundError(requested)

        entity = parse_entity(body, requested)
        if entity.missing:
            raise NotFoundError(entity.id or requested)
        return entity

    def get_labels(self, ids: Iterable[str], language: Optional[str] = None) -> dict[str, str]:
        """Labels for up to 50 ids; ids without any label map to themselves"""
        ids = list(ids)
        if not ids:
            return {}

        language = language or settings.language
        languages = language if language == "en" else f"{language}|en"
        body = self.get_entities(ids, languages=languages, props="labels")
        entities = body.get("entities")
        if not isinstance(entities, dict):
            raise ParseError("Response has no 'entities' object")

        labels = {}
        for entity_id in ids:
            entity = parse_entity(entities[entity_id], entity_id) if entity_id in entities else None
            labels[entity_id] = entity.get_label(language) if entity is not None else entity_id
        return labels

    def get_random_entity_id(self) -> str:
        body = self._request(
            "GET",
            {"action": "query", "list": "random", "rnnamespace": 0, "rnlimit": 1},
        )
        try:
            return body["query"]["random"][0]["title"]
        except (KeyError, IndexError, TypeError) as e:
            raise ParseError("Random page response has no title") from e

    def get_csrf_token(self) -> str:
        body = self._request("GET", {"action": "query", "meta": "tokens", "type": "csrf"})
        token = (body.get("query") or {}).get("tokens", {}).get("csrftoken")
        # "+\\" is the anonymous token
        if not token or token == "+\\":
            raise ApiError(code="notoken", info="Empty CSRF token")
        return token

    def _edit(self, params: dict[str, Any]) -> dict[str, Any]:
        params["token"] = self.get_csrf_token()
        logger.info(f"Submitting {params['action']}")
        return self._request("POST", params)

    def set_label(self, entity_id: str, language: str, value: str) -> dict[str, Any]:
        return self._edit({"action": "wbsetlabel", "id": entity_id, "language": language, "value": value})

    def set_description(self, entity_id: str, language: str, value: str) -> dict[str, Any]:
        return self._edit({"action": "wbsetdescription", "id": entity_id, "language": language, "value": value})

    def create_claim(self, entity_id: str, property_id: str, value: str) -> dict[str, Any]:
        return self._edit(
            {
                "action": "wbcreateclaim",
                "entity": entity_id,
                "property": property_id,
                "snaktype": "value",
                "value": build_snak_value(value),
            }
        )

    def set_claim(self, claim_id: str, property_id: str, value: str) -> dict[str, Any]:
        claim = {"id": claim_id, "type": "claim", "mainsnak": build_value_snak(property_id, value)}
        return self._edit({"action": "wbsetclaim", "claim": json.dumps(claim)})

    def set_qualifier(self, claim_id: str, property_id: str, value: str) -> dict[str, Any]:
        return self._edit(
            {
                "action": "wbsetqualifier",
                "claim": claim_id,
                "property": property_id,
                "snaktype": "value",
                "value": build_snak_value(value),
            }
        )

    def set_reference(self, statement_id: str, property_id: str, value: str) -> dict[str, Any]:
        snaks = {property_id: [build_value_snak(property_id, value)]}
        return self._edit(
            {
                "action": "wbsetreference",
                "statement": statement_id,
                "snaks": json.dumps(snaks),
                "snaks-order": json.dumps([property_id]),
            }
        )
