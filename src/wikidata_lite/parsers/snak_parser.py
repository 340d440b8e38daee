from typing import Any

from pydantic import ValidationError

from wikidata_lite.errors import ParseError
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.snak_types import SnakType
from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.parsers.value_parser import parse_value


def parse_snak(snak_json: Any, property_id: str = "") -> Snak:
    if not isinstance(snak_json, dict):
        raise ParseError(f"Snak must be an object, got {type(snak_json).__name__}")

    raw_snaktype = snak_json.get(JsonField.SNAKTYPE.value, SnakType.VALUE.value)
    try:
        snaktype = SnakType(raw_snaktype)
    except ValueError:
        raise ParseError(f"Unknown snaktype: {raw_snaktype}")

    value = parse_value(snak_json)
    datavalue = snak_json.get(JsonField.DATAVALUE.value)
    datavalue_type = None
    if value is not None and isinstance(datavalue, dict):
        datavalue_type = datavalue.get(JsonField.TYPE.value)

    try:
        return Snak(
            snaktype=snaktype,
            property=snak_json.get(JsonField.PROPERTY.value) or property_id,
            datatype=snak_json.get(JsonField.DATATYPE.value),
            value=value,
            datavalue_type=datavalue_type,
            hash=snak_json.get(JsonField.HASH.value),
        )
    except ValidationError as e:
        raise ParseError(f"Malformed snak for property {property_id or '?'}: {e}") from e


def parse_snak_map(snaks_json: Any) -> dict[str, list[Snak]]:
    """Parse a property-id -> [snak] map keeping the per-property order"""
    if not snaks_json:
        return {}
    if not isinstance(snaks_json, dict):
        raise ParseError(f"Snak map must be an object, got {type(snaks_json).__name__}")

    return {
        property_id: [parse_snak(snak_json, property_id) for snak_json in snak_list or []]
        for property_id, snak_list in snaks_json.items()
    }
