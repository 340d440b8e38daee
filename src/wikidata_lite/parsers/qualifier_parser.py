from typing import Any

from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.parsers.snak_parser import parse_snak, parse_snak_map


def parse_qualifier(qualifier_json: dict[str, Any], property_id: str = "") -> Snak:
    return parse_snak(qualifier_json, property_id)


def parse_qualifiers(qualifiers_json: dict[str, list[dict[str, Any]]]) -> dict[str, list[Snak]]:
    return parse_snak_map(qualifiers_json)
