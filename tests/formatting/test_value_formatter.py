import pytest

from wikidata_lite.formatting import ValueFormatter, display_sentinel, format_claim_value, format_snak
from wikidata_lite.models.internal_representation.snak_types import SnakType
from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.models.internal_representation.values import UnknownValue
from wikidata_lite.parsers import parse_entity, parse_snak

ITEM_LABELS = {"Q5": "human", "Q11573": "metre", "Q350": "Cambridge"}
PROPERTY_LABELS = {"P31": "instance of"}


def _snak(datatype, datavalue_type, raw):
    return parse_snak(
        {
            "snaktype": "value",
            "property": "P1",
            "datatype": datatype,
            "datavalue": {"value": raw, "type": datavalue_type},
        }
    )


def _time_snak(time, precision):
    return _snak("time", "time", {"time": time, "precision": precision})


def _quantity_snak(amount, unit):
    return _snak("quantity", "quantity", {"amount": amount, "unit": unit})


@pytest.mark.parametrize("snaktype", ["novalue", "somevalue"])
def test_format_snak_without_value_returns_snaktype(snaktype):
    """Test that value-less snaks render as their snaktype"""
    snak = parse_snak({"snaktype": snaktype, "property": "P40"})
    assert format_snak(snak) == snaktype


def test_display_sentinel():
    """Test UI text for value-less snaks"""
    assert display_sentinel("novalue") == "no value"
    assert display_sentinel("somevalue") == "unknown value"
    assert display_sentinel("value") == "value"


def test_format_entity_with_label():
    """Test that a labelled entity renders as 'label (id)'"""
    snak = _snak("wikibase-item", "wikibase-entityid", {"entity-type": "item", "numeric-id": 5, "id": "Q5"})
    assert format_snak(snak, ITEM_LABELS) == "human (Q5)"


def test_format_entity_without_label():
    """Test that an unlabelled entity renders as its bare id"""
    snak = _snak(
        "wikibase-item",
        "wikibase-entityid",
        {"entity-type": "item", "numeric-id": 99999999, "id": "Q99999999"},
    )
    assert format_snak(snak, ITEM_LABELS) == "Q99999999"


def test_format_entity_whose_label_is_its_id():
    """Test that a label equal to the id is not repeated"""
    assert ValueFormatter.format_entity_id("Q7", {"Q7": "Q7"}, {}) == "Q7"


def test_format_property_entity_uses_property_labels():
    """Test that property-valued snaks use the property label map"""
    snak = _snak("wikibase-property", "wikibase-entityid", {"entity-type": "property", "numeric-id": 31})
    assert format_snak(snak, ITEM_LABELS, PROPERTY_LABELS) == "instance of (P31)"


@pytest.mark.parametrize(
    "time,precision,expected",
    [
        ("+1921-00-00T00:00:00Z", 9, "1921"),
        ("+1952-03-00T00:00:00Z", 10, "1952-03"),
        ("+1952-03-11T00:00:00Z", 11, "1952-03-11"),
        ("+1952-03-11T00:00:00Z", 14, "1952-03-11"),
        ("+1900-00-00T00:00:00Z", 7, "1900"),
        ("+0800-12-25T00:00:00Z", 11, "0800-12-25"),
        ("-0044-03-15T00:00:00Z", 11, "0044-03-15"),
    ],
)
def test_format_time(time, precision, expected):
    """Test time values are truncated to their precision"""
    assert format_snak(_time_snak(time, precision)) == expected


def test_format_time_pads_short_years():
    """Test that short years are zero filled"""
    assert ValueFormatter.format_time("+800-01-01T00:00:00Z", 9) == "0800"


def test_format_time_malformed():
    """Test that an unparseable timestamp is returned without its sign"""
    assert ValueFormatter.format_time("+not-a-date", 11) == "not-a-date"


def test_format_quantity_with_unit_label():
    """Test that a unit renders with its label"""
    snak = _quantity_snak("+1.96", "http://www.wikidata.org/entity/Q11573")
    assert format_snak(snak, ITEM_LABELS) == "1.96 metre"


def test_format_quantity_with_unlabelled_unit():
    """Test that a unit without a label renders as its id"""
    snak = _quantity_snak("+3", "http://www.wikidata.org/entity/Q828224")
    assert format_snak(snak, ITEM_LABELS) == "3 Q828224"


@pytest.mark.parametrize("unit", ["1", "http://www.wikidata.org/entity/Q199"])
def test_format_dimensionless_quantity(unit):
    """Test that dimensionless quantities render without a unit"""
    assert format_snak(_quantity_snak("+5", unit)) == "5"


def test_format_negative_quantity():
    """Test that negative amounts keep their sign"""
    assert format_snak(_quantity_snak("-273.15", "1")) == "-273.15"


def test_format_coordinate():
    """Test coordinates render with four decimals"""
    snak = _snak(
        "globe-coordinate",
        "globecoordinate",
        {"latitude": 51.5072, "longitude": -0.1276, "globe": "http://www.wikidata.org/entity/Q2"},
    )
    assert format_snak(snak) == "51.5072°, -0.1276°"


@pytest.mark.parametrize(
    "datatype,datavalue_type,raw,expected",
    [
        ("string", "string", "hello", "hello"),
        ("external-id", "string", "113230702", "113230702"),
        ("url", "string", "https://douglasadams.com/", "https://douglasadams.com/"),
        ("commonsMedia", "string", "Douglas adams gravestone.jpg", "Douglas adams gravestone.jpg"),
        ("monolingualtext", "monolingualtext", {"text": "Douglas Noël Adams", "language": "en"}, "Douglas Noël Adams"),
    ],
)
def test_format_text_values(datatype, datavalue_type, raw, expected):
    """Test that text backed values render as their text"""
    assert format_snak(_snak(datatype, datavalue_type, raw)) == expected


def test_format_unknown_value_uses_nested_field():
    """Test that an unknown value renders its most specific subfield"""
    snak = _snak("wikibase-item", "monolingualtext", {"text": "odd", "language": "en"})
    assert snak.value.kind == "unknown"
    assert format_snak(snak) == "odd"


def test_format_unknown_scalar_value():
    """Test that an unknown scalar value renders as text"""
    snak = Snak(snaktype=SnakType.VALUE, property="P1", value=UnknownValue(value=42, type="number"))
    assert format_snak(snak) == "42"


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, ""),
        ("plain", "plain"),
        ({"amount": "+7"}, "+7"),
        ({"time": "+2001-01-01T00:00:00Z"}, "+2001-01-01T00:00:00Z"),
        ({"nested": {"deep": 1}}, "{'nested': {'deep': 1}}"),
    ],
)
def test_format_raw(raw, expected):
    """Test the least specific rendering of untyped values"""
    assert ValueFormatter.format_raw(raw) == expected


def test_format_claim_value(q42_json):
    """Test formatting main snaks of parsed claims"""
    entity = parse_entity(q42_json)
    assert format_claim_value(entity.claims["P31"][0], ITEM_LABELS) == "human (Q5)"
    assert format_claim_value(entity.claims["P19"][0], ITEM_LABELS) == "Cambridge (Q350)"
    assert format_claim_value(entity.claims["P569"][0]) == "1952-03-11"
    assert format_claim_value(entity.claims["P2048"][0], ITEM_LABELS) == "1.96 metre"
    assert format_claim_value(entity.claims["P1971"][0]) == "2"
    assert format_claim_value(entity.claims["P40"][0]) == "novalue"


def test_format_qualifier_time(q42_json):
    """Test that qualifiers are formatted like main snaks"""
    entity = parse_entity(q42_json)
    qualifier = entity.claims["P19"][0].qualifiers["P580"][0]
    assert format_snak(qualifier) == "1952"
