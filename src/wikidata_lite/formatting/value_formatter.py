import logging
from typing import Any, Mapping, Optional

from wikidata_lite.models.internal_representation.snak_types import SnakType
from wikidata_lite.models.internal_representation.snaks import Snak
from wikidata_lite.models.internal_representation.statements import Claim
from wikidata_lite.models.internal_representation.value_kinds import ValueKind

logger = logging.getLogger(__name__)

SENTINEL_LABELS = {
    SnakType.NOVALUE.value: "no value",
    SnakType.SOMEVALUE.value: "unknown value",
}

# Subfields tried, in order, when an unrecognised value is an object
NESTED_VALUE_FIELDS = ("value", "text", "amount", "time")

EMPTY_LABELS: Mapping[str, str] = {}


class ValueFormatter:
    """Format typed snak values as human-readable display strings"""

    @staticmethod
    def format_snak(
        snak: Snak,
        item_labels: Optional[Mapping[str, str]] = None,
        property_labels: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Display string for a snak; the snaktype itself when there is no value"""
        if snak.snaktype != SnakType.VALUE or snak.value is None:
            return snak.snaktype.value

        try:
            return ValueFormatter.format_value(
                snak.value, item_labels or EMPTY_LABELS, property_labels or EMPTY_LABELS
            )
        except (AttributeError, TypeError, ValueError) as e:
            logger.debug(f"Falling back to raw value for {snak.property}: {e}")
            return ValueFormatter.format_raw(getattr(snak.value, "value", None))

    @staticmethod
    def format_value(value: Any, item_labels: Mapping[str, str], property_labels: Mapping[str, str]) -> str:
        kind = value.kind

        if kind == ValueKind.ENTITY:
            return ValueFormatter.format_entity_id(value.value, item_labels, property_labels)

        elif kind == ValueKind.TIME:
            return ValueFormatter.format_time(value.value, value.precision)

        elif kind == ValueKind.QUANTITY:
            return ValueFormatter.format_quantity(value.value, value.unit_id, item_labels)

        elif kind == ValueKind.GLOBE:
            return ValueFormatter.format_coordinate(value.latitude, value.longitude)

        elif kind in (
            ValueKind.STRING,
            ValueKind.MONOLINGUAL,
            ValueKind.EXTERNAL_ID,
            ValueKind.COMMONS_MEDIA,
            ValueKind.URL,
        ):
            return value.value

        else:
            return ValueFormatter.format_raw(value.value)

    @staticmethod
    def format_entity_id(
        entity_id: str, item_labels: Mapping[str, str], property_labels: Mapping[str, str]
    ) -> str:
        label = item_labels.get(entity_id) or property_labels.get(entity_id)
        if label and label != entity_id:
            return f"{label} ({entity_id})"
        return entity_id

    @staticmethod
    def format_time(time: str, precision: int) -> str:
        """Truncate a ``+YYYY-MM-DDTHH:MM:SSZ`` timestamp to its precision.

        9 is year, 10 is month, 11 and above is day. Coarser precisions
        (decade, century, ...) also render the year.
        """
        unsigned = time.lstrip("+-")
        date_part = unsigned.split("T", 1)[0]
        parts = date_part.split("-")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            return unsigned

        year, month, day = parts
        year = year.zfill(4)
        if precision <= 9:
            return year
        if precision == 10:
            return f"{year}-{month}"
        return f"{year}-{month}-{day}"

    @staticmethod
    def format_quantity(amount: str, unit_id: Optional[str], item_labels: Mapping[str, str]) -> str:
        amount = amount[1:] if amount.startswith("+") else amount
        if not unit_id:
            return amount
        return f"{amount} {item_labels.get(unit_id) or unit_id}"

    @staticmethod
    def format_coordinate(latitude: float, longitude: float) -> str:
        return f"{latitude:.4f}°, {longitude:.4f}°"

    @staticmethod
    def format_raw(raw: Any) -> str:
        """Least specific rendering of an untyped value"""
        if raw is None:
            return ""
        if isinstance(raw, dict):
            for field in NESTED_VALUE_FIELDS:
                nested = raw.get(field)
                if nested is not None and not isinstance(nested, (dict, list)):
                    return str(nested)
        return str(raw)


def format_snak(
    snak: Snak,
    item_labels: Optional[Mapping[str, str]] = None,
    property_labels: Optional[Mapping[str, str]] = None,
) -> str:
    return ValueFormatter.format_snak(snak, item_labels, property_labels)


def format_claim_value(
    claim: Claim,
    item_labels: Optional[Mapping[str, str]] = None,
    property_labels: Optional[Mapping[str, str]] = None,
) -> str:
    return ValueFormatter.format_snak(claim.mainsnak, item_labels, property_labels)


def display_sentinel(snaktype: str) -> str:
    """UI text for a value-less snak: 'no value' / 'unknown value'"""
    return SENTINEL_LABELS.get(snaktype, snaktype)
