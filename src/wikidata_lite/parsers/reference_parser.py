from typing import Any

from pydantic import ValidationError

from wikidata_lite.errors import ParseError
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.references import Reference
from wikidata_lite.parsers.snak_parser import parse_snak_map


def parse_reference(reference_json: Any) -> Reference:
    if not isinstance(reference_json, dict):
        raise ParseError(f"Reference must be an object, got {type(reference_json).__name__}")

    try:
        return Reference(
            hash=reference_json.get(JsonField.HASH.value),
            snaks=parse_snak_map(reference_json.get(JsonField.SNAKS.value)),
            snaks_order=reference_json.get(JsonField.SNAKS_ORDER.value) or [],
        )
    except ValidationError as e:
        raise ParseError(f"Malformed reference: {e}") from e


def parse_references(references_json: list[dict[str, Any]]) -> list[Reference]:
    return [parse_reference(reference_json) for reference_json in references_json or []]
