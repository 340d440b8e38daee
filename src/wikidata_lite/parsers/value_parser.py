import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from wikidata_lite.models.internal_representation.datatypes import (
    ENTITY_DATATYPES,
    Datatype,
    DatavalueType,
)
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.snak_types import SnakType
from wikidata_lite.models.internal_representation.values import (
    CommonsMediaValue,
    EntityValue,
    ExternalIDValue,
    GlobeValue,
    MonolingualValue,
    QuantityValue,
    StringValue,
    TimeValue,
    UnknownValue,
    URLValue,
    Value,
)

logger = logging.getLogger(__name__)

ENTITY_ID_PREFIXES = {
    "item": "Q",
    "property": "P",
    "lexeme": "L",
}


def _require_dict(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise TypeError(f"Expected an object, got {type(raw).__name__}")
    return raw


def _require_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise TypeError(f"Expected a string, got {type(raw).__name__}")
    return raw


def parse_entity_value(raw: Any) -> EntityValue:
    raw = _require_dict(raw)
    entity_type = raw.get("entity-type")
    numeric_id = raw.get("numeric-id")
    entity_id = raw.get("id") or raw.get("entity-id")

    if not entity_id and numeric_id is not None and entity_type in ENTITY_ID_PREFIXES:
        entity_id = f"{ENTITY_ID_PREFIXES[entity_type]}{numeric_id}"
    if not entity_id:
        raise ValueError(f"Entity value without id: {raw}")

    return EntityValue(value=str(entity_id), entity_type=entity_type, numeric_id=numeric_id)


def parse_string_value(raw: Any) -> StringValue:
    return StringValue(value=_require_str(raw))


def parse_external_id_value(raw: Any) -> ExternalIDValue:
    return ExternalIDValue(value=_require_str(raw))


def parse_url_value(raw: Any) -> URLValue:
    return URLValue(value=_require_str(raw))


def parse_commons_media_value(raw: Any) -> CommonsMediaValue:
    return CommonsMediaValue(value=_require_str(raw))


def parse_monolingual_value(raw: Any) -> MonolingualValue:
    raw = _require_dict(raw)
    return MonolingualValue(value=_require_str(raw.get("text")), language=raw.get("language", ""))


def parse_time_value(raw: Any) -> TimeValue:
    raw = _require_dict(raw)
    fields = {
        "timezone": raw.get("timezone"),
        "before": raw.get("before"),
        "after": raw.get("after"),
        "precision": raw.get("precision"),
        "calendarmodel": raw.get("calendarmodel"),
    }
    return TimeValue(
        value=_require_str(raw.get("time")),
        **{key: value for key, value in fields.items() if value is not None},
    )


def parse_quantity_value(raw: Any) -> QuantityValue:
    raw = _require_dict(raw)
    return QuantityValue(
        value=_require_str(raw.get("amount")),
        unit=raw.get("unit") or "1",
        upper_bound=raw.get("upperBound"),
        lower_bound=raw.get("lowerBound"),
    )


def parse_globe_value(raw: Any) -> GlobeValue:
    raw = _require_dict(raw)
    fields = {
        "altitude": raw.get("altitude"),
        "precision": raw.get("precision"),
        "globe": raw.get("globe"),
    }
    return GlobeValue(
        latitude=raw.get("latitude"),
        longitude=raw.get("longitude"),
        **{key: value for key, value in fields.items() if value is not None},
    )


PARSERS: dict[str, Callable[[Any], Value]] = {
    **{datatype: parse_entity_value for datatype in ENTITY_DATATYPES},
    Datatype.STRING.value: parse_string_value,
    Datatype.EXTERNAL_ID.value: parse_external_id_value,
    Datatype.URL.value: parse_url_value,
    Datatype.COMMONS_MEDIA.value: parse_commons_media_value,
    Datatype.TIME.value: parse_time_value,
    Datatype.QUANTITY.value: parse_quantity_value,
    Datatype.GLOBE_COORDINATE.value: parse_globe_value,
    Datatype.MONOLINGUALTEXT.value: parse_monolingual_value,
}

# Fallback when a snak has no datatype (e.g. some API responses omit it)
DATAVALUE_TYPE_PARSERS: dict[str, Callable[[Any], Value]] = {
    DatavalueType.WIKIBASE_ENTITYID.value: parse_entity_value,
    DatavalueType.STRING.value: parse_string_value,
    DatavalueType.TIME.value: parse_time_value,
    DatavalueType.QUANTITY.value: parse_quantity_value,
    DatavalueType.GLOBECOORDINATE.value: parse_globe_value,
    DatavalueType.MONOLINGUALTEXT.value: parse_monolingual_value,
}


def parse_datavalue(datavalue: Any, datatype: Optional[str] = None) -> Optional[Value]:
    """Convert a raw ``datavalue`` object into a typed value.

    The parser is chosen by ``datatype`` first, then by ``datavalue.type``.
    Shapes that do not match become an UnknownValue instead of raising.
    """
    if not isinstance(datavalue, dict):
        return None

    datavalue_type = datavalue.get(JsonField.TYPE.value)
    raw = datavalue.get(JsonField.VALUE.value)
    if raw is None:
        return None

    parser = PARSERS.get(str(datatype)) or DATAVALUE_TYPE_PARSERS.get(str(datavalue_type))
    if not parser:
        logger.debug(f"Unsupported value type: {datavalue_type}, datatype: {datatype}")
        return UnknownValue(value=raw, type=datavalue_type)

    try:
        return parser(raw)
    except (ValidationError, ValueError, TypeError) as e:
        logger.debug(f"Value does not match datatype {datatype} ({datavalue_type}): {e}")
        return UnknownValue(value=raw, type=datavalue_type)


def parse_value(snak_json: dict[str, Any]) -> Optional[Value]:
    """Typed value of a snak; None for novalue/somevalue snaks or a missing datavalue"""
    if snak_json.get(JsonField.SNAKTYPE.value) != SnakType.VALUE.value:
        return None
    return parse_datavalue(
        snak_json.get(JsonField.DATAVALUE.value),
        snak_json.get(JsonField.DATATYPE.value),
    )
