from wikidata_lite.formatting.value_formatter import (
    ValueFormatter,
    display_sentinel,
    format_claim_value,
    format_snak,
)

__all__ = [
    "ValueFormatter",
    "display_sentinel",
    "format_claim_value",
    "format_snak",
]
