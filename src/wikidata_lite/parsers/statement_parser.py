import logging
from typing import Any

from pydantic import ValidationError

from wikidata_lite.errors import ParseError
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.ranks import Rank
from wikidata_lite.models.internal_representation.statements import Claim
from wikidata_lite.parsers.qualifier_parser import parse_qualifiers
from wikidata_lite.parsers.reference_parser import parse_references
from wikidata_lite.parsers.snak_parser import parse_snak

logger = logging.getLogger(__name__)


def _parse_rank(raw_rank: Any) -> Rank:
    if raw_rank is None:
        return Rank.NORMAL
    try:
        return Rank(raw_rank)
    except ValueError:
        logger.warning(f"Unknown rank {raw_rank!r}, using normal")
        return Rank.NORMAL


def parse_statement(statement_json: dict[str, Any], property_id: str = "") -> Claim:
    if not isinstance(statement_json, dict):
        raise ParseError(f"Claim must be an object, got {type(statement_json).__name__}")

    mainsnak = statement_json.get(JsonField.MAINSNAK.value)
    if not mainsnak:
        claim_id = statement_json.get(JsonField.ID.value, "<unsaved>")
        raise ParseError(f"Claim {claim_id} for property {property_id or '?'} has no mainsnak")

    try:
        return Claim(
            id=statement_json.get(JsonField.ID.value),
            mainsnak=parse_snak(mainsnak, property_id),
            type=statement_json.get(JsonField.TYPE.value),
            rank=_parse_rank(statement_json.get(JsonField.RANK.value)),
            qualifiers=parse_qualifiers(statement_json.get(JsonField.QUALIFIERS.value)),
            qualifiers_order=statement_json.get(JsonField.QUALIFIERS_ORDER.value) or [],
            references=parse_references(statement_json.get(JsonField.REFERENCES.value)),
        )
    except ValidationError as e:
        raise ParseError(f"Malformed claim for property {property_id or '?'}: {e}") from e
