import logging
from typing import Any, Optional

from pydantic import ValidationError

from wikidata_lite.errors import ParseError
from wikidata_lite.models.internal_representation.entity import Entity
from wikidata_lite.models.internal_representation.entity_types import EntityKind
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.statements import Claim
from wikidata_lite.models.internal_representation.terms import Sitelink, Term
from wikidata_lite.parsers.statement_parser import parse_statement

logger = logging.getLogger(__name__)


def parse_entity(entity_json: dict[str, Any], entity_id: Optional[str] = None) -> Entity:
    # Handle nested structure {"entities": {"Q42": {...}}}
    if isinstance(entity_json, dict) and JsonField.ENTITIES.value in entity_json:
        entities = entity_json[JsonField.ENTITIES.value]
        if not isinstance(entities, dict) or not entities:
            raise ParseError("Response contains no entities")
        entity_json = entities.get(entity_id) if entity_id else None
        if entity_json is None:
            entity_json = next(iter(entities.values()))

    if not isinstance(entity_json, dict):
        raise ParseError(f"Entity must be an object, got {type(entity_json).__name__}")

    parsed_id = entity_json.get(JsonField.ID.value) or entity_id or ""

    if JsonField.MISSING.value in entity_json:
        logger.debug(f"Entity {parsed_id} is marked missing")
        return Entity(id=parsed_id, missing=True)

    if not parsed_id:
        raise ParseError("Entity has no id")

    try:
        return _build_entity(parsed_id, entity_json)
    except (ValidationError, ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Malformed entity {parsed_id}: {e}")
        raise ParseError(f"Malformed entity {parsed_id}: {e}") from e


def _build_entity(entity_id: str, entity_json: dict[str, Any]) -> Entity:
    lastrevid = entity_json.get(JsonField.LASTREVID.value)

    return Entity(
        id=entity_id,
        type=_parse_type(entity_json.get(JsonField.TYPE.value)),
        labels=_parse_terms(entity_json.get(JsonField.LABELS.value)),
        descriptions=_parse_terms(entity_json.get(JsonField.DESCRIPTIONS.value)),
        aliases=_parse_aliases(entity_json.get(JsonField.ALIASES.value)),
        claims=_parse_claims(entity_json.get(JsonField.CLAIMS.value)),
        sitelinks=_parse_sitelinks(entity_json.get(JsonField.SITELINKS.value)),
        lastrevid=int(lastrevid) if lastrevid is not None else None,
        modified=entity_json.get(JsonField.MODIFIED.value),
    )


def parse_entities_response(response_json: dict[str, Any]) -> dict[str, Entity]:
    """Parse every entity of a ``wbgetentities`` response, keyed as in the response"""
    entities = response_json.get(JsonField.ENTITIES.value)
    if not isinstance(entities, dict):
        raise ParseError("Response has no 'entities' object")
    return {key: parse_entity(entity_json, key) for key, entity_json in entities.items()}


def _parse_type(raw_type: Any) -> Optional[EntityKind]:
    if raw_type is None:
        return None
    try:
        return EntityKind(raw_type)
    except ValueError:
        logger.debug(f"Unsupported entity type: {raw_type}")
        return None


def _require_map(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ParseError(f"{what} must be an object, got {type(raw).__name__}")
    return raw


def _parse_term(language: str, term_json: Any) -> Term:
    if not isinstance(term_json, dict):
        raise ParseError(f"Term for language {language} must be an object")
    return Term(
        language=term_json.get(JsonField.LANGUAGE.value, language),
        value=str(term_json.get(JsonField.VALUE.value, "")),
    )


def _parse_terms(terms_json: Any) -> dict[str, Term]:
    if not terms_json:
        return {}
    terms_json = _require_map(terms_json, "Terms")
    return {language: _parse_term(language, term_json) for language, term_json in terms_json.items()}


def _parse_alias_list(language: str, alias_list: Any) -> list[Term]:
    if not alias_list:
        return []
    if not isinstance(alias_list, list):
        raise ParseError(f"Aliases for language {language} must be a list")
    return [_parse_term(language, alias_json) for alias_json in alias_list]


def _parse_aliases(aliases_json: Any) -> dict[str, list[Term]]:
    if not aliases_json:
        return {}
    aliases_json = _require_map(aliases_json, "Aliases")
    return {language: _parse_alias_list(language, alias_list) for language, alias_list in aliases_json.items()}


def _parse_claims(claims_json: Any) -> dict[str, list[Claim]]:
    if not claims_json:
        return {}
    claims_json = _require_map(claims_json, "Claims")

    return {
        property_id: [parse_statement(claim_json, property_id) for claim_json in claim_list or []]
        for property_id, claim_list in claims_json.items()
    }


def _parse_sitelinks(sitelinks_json: Any) -> dict[str, Sitelink]:
    if not sitelinks_json:
        return {}

    sitelinks = {}
    for site_id, sitelink_json in _require_map(sitelinks_json, "Sitelinks").items():
        if not isinstance(sitelink_json, dict):
            raise ParseError(f"Sitelink {site_id} must be an object")
        sitelinks[site_id] = Sitelink(
            site=sitelink_json.get("site", site_id),
            title=sitelink_json.get("title", ""),
            badges=sitelink_json.get("badges") or [],
            url=sitelink_json.get("url"),
        )
    return sitelinks
