import json
import re
from typing import Any

ITEM_ID_PATTERN = re.compile(r"^Q(\d+)$", re.IGNORECASE)
PROPERTY_ID_PATTERN = re.compile(r"^P(\d+)$", re.IGNORECASE)


def _entity_reference(text: str) -> dict[str, Any] | None:
    """``{"entity-type": ..., "numeric-id": ...}`` when text is a Q/P id"""
    item_match = ITEM_ID_PATTERN.match(text)
    if item_match:
        return {"entity-type": "item", "numeric-id": int(item_match.group(1))}
    property_match = PROPERTY_ID_PATTERN.match(text)
    if property_match:
        return {"entity-type": "property", "numeric-id": int(property_match.group(1))}
    return None


def build_snak_value(value: str) -> str:
    """JSON ``value`` parameter for wbcreateclaim / wbsetqualifier.

    Q/P ids become entity references, anything else a plain string.
    """
    text = value.strip()
    reference = _entity_reference(text)
    if reference is not None:
        return json.dumps(reference)
    return json.dumps(text)


def build_datavalue(value: str) -> dict[str, Any]:
    """Full datavalue object for wbsetclaim / wbsetreference"""
    text = value.strip()
    reference = _entity_reference(text)
    if reference is not None:
        return {"type": "wikibase-entityid", "value": reference}
    return {"type": "string", "value": text}


def build_value_snak(property_id: str, value: str) -> dict[str, Any]:
    return {"snaktype": "value", "property": property_id, "datavalue": build_datavalue(value)}
