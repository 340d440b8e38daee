from typing import Any, Optional

from wikidata_lite.models.internal_representation.datatypes import DatavalueType
from wikidata_lite.models.internal_representation.entity import Entity
from wikidata_lite.models.internal_representation.json_fields import JsonField
from wikidata_lite.models.internal_representation.references import Reference
from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.models.internal_representation.statements import Claim
from wikidata_lite.models.internal_representation.terms import Term
from wikidata_lite.models.internal_representation.value_kinds import ValueKind

DEFAULT_DATAVALUE_TYPES = {
    ValueKind.ENTITY: DatavalueType.WIKIBASE_ENTITYID.value,
    ValueKind.STRING: DatavalueType.STRING.value,
    ValueKind.EXTERNAL_ID: DatavalueType.STRING.value,
    ValueKind.URL: DatavalueType.STRING.value,
    ValueKind.COMMONS_MEDIA: DatavalueType.STRING.value,
    ValueKind.TIME: DatavalueType.TIME.value,
    ValueKind.QUANTITY: DatavalueType.QUANTITY.value,
    ValueKind.GLOBE: DatavalueType.GLOBECOORDINATE.value,
    ValueKind.MONOLINGUAL: DatavalueType.MONOLINGUALTEXT.value,
}


def _without_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def serialize_value(value: Any) -> Any:
    """Inverse of the value parsers: the raw ``datavalue.value`` JSON"""
    kind = value.kind

    if kind == ValueKind.ENTITY:
        return _without_none(
            {
                "entity-type": value.entity_type,
                "numeric-id": value.numeric_id,
                "id": value.value,
            }
        )

    elif kind == ValueKind.TIME:
        return {
            "time": value.value,
            "timezone": value.timezone,
            "before": value.before,
            "after": value.after,
            "precision": value.precision,
            "calendarmodel": value.calendarmodel,
        }

    elif kind == ValueKind.QUANTITY:
        return _without_none(
            {
                "amount": value.value,
                "unit": value.unit,
                "upperBound": value.upper_bound,
                "lowerBound": value.lower_bound,
            }
        )

    elif kind == ValueKind.GLOBE:
        return {
            "latitude": value.latitude,
            "longitude": value.longitude,
            "altitude": value.altitude,
            "precision": value.precision,
            "globe": value.globe,
        }

    elif kind == ValueKind.MONOLINGUAL:
        return {"text": value.value, "language": value.language}

    else:
        return value.value


def serialize_datavalue(value: Any, datavalue_type: Optional[str] = None) -> dict[str, Any]:
    if value.kind == ValueKind.UNKNOWN:
        datavalue_type = datavalue_type or value.type
    else:
        datavalue_type = datavalue_type or DEFAULT_DATAVALUE_TYPES[ValueKind(value.kind)]
    return _without_none({"value": serialize_value(value), "type": datavalue_type})


def serialize_snak(snak: Snak) -> dict[str, Any]:
    snak_json = {
        JsonField.SNAKTYPE.value: snak.snaktype.value,
        JsonField.PROPERTY.value: snak.property,
    }
    if snak.hash is not None:
        snak_json[JsonField.HASH.value] = snak.hash
    if snak.value is not None:
        snak_json[JsonField.DATAVALUE.value] = serialize_datavalue(snak.value, snak.datavalue_type)
    if snak.datatype is not None:
        snak_json[JsonField.DATATYPE.value] = snak.datatype
    return snak_json


def _serialize_snak_map(snaks: dict[str, list[Snak]]) -> dict[str, list[dict[str, Any]]]:
    return {property_id: [serialize_snak(snak) for snak in snak_list] for property_id, snak_list in snaks.items()}


def serialize_reference(reference: Reference) -> dict[str, Any]:
    reference_json: dict[str, Any] = {}
    if reference.hash is not None:
        reference_json[JsonField.HASH.value] = reference.hash
    reference_json[JsonField.SNAKS.value] = _serialize_snak_map(reference.snaks)
    reference_json[JsonField.SNAKS_ORDER.value] = list(reference.snaks_order)
    return reference_json


def serialize_statement(claim: Claim) -> dict[str, Any]:
    claim_json: dict[str, Any] = {JsonField.MAINSNAK.value: serialize_snak(claim.mainsnak)}
    if claim.type is not None:
        claim_json[JsonField.TYPE.value] = claim.type
    if claim.id is not None:
        claim_json[JsonField.ID.value] = claim.id
    claim_json[JsonField.RANK.value] = claim.rank.value
    if claim.qualifiers:
        claim_json[JsonField.QUALIFIERS.value] = _serialize_snak_map(claim.qualifiers)
    if claim.qualifiers_order:
        claim_json[JsonField.QUALIFIERS_ORDER.value] = list(claim.qualifiers_order)
    if claim.references:
        claim_json[JsonField.REFERENCES.value] = [serialize_reference(reference) for reference in claim.references]
    return claim_json


def _serialize_term(term: Term) -> dict[str, str]:
    return {JsonField.LANGUAGE.value: term.language, JsonField.VALUE.value: term.value}


def serialize_entity(entity: Entity) -> dict[str, Any]:
    """Entity back into the ``wbgetentities`` JSON shape"""
    if entity.missing:
        return {JsonField.ID.value: entity.id, JsonField.MISSING.value: ""}

    entity_json: dict[str, Any] = {JsonField.ID.value: entity.id}
    if entity.type is not None:
        entity_json[JsonField.TYPE.value] = entity.type.value
    if entity.lastrevid is not None:
        entity_json[JsonField.LASTREVID.value] = entity.lastrevid
    if entity.modified is not None:
        entity_json[JsonField.MODIFIED.value] = entity.modified

    entity_json[JsonField.LABELS.value] = {
        language: _serialize_term(term) for language, term in entity.labels.items()
    }
    entity_json[JsonField.DESCRIPTIONS.value] = {
        language: _serialize_term(term) for language, term in entity.descriptions.items()
    }
    entity_json[JsonField.ALIASES.value] = {
        language: [_serialize_term(term) for term in terms] for language, terms in entity.aliases.items()
    }
    entity_json[JsonField.CLAIMS.value] = {
        property_id: [serialize_statement(claim) for claim in claim_list]
        for property_id, claim_list in entity.claims.items()
    }
    entity_json[JsonField.SITELINKS.value] = {
        site_id: _without_none(
            {
                "site": sitelink.site,
                "title": sitelink.title,
                "badges": list(sitelink.badges),
                "url": sitelink.url,
            }
        )
        for site_id, sitelink in entity.sitelinks.items()
    }
    return entity_json
