from wikidata_lite.parsers.entity_parser import parse_entity, parse_entities_response
from wikidata_lite.parsers.qualifier_parser import parse_qualifiers, parse_qualifier
from wikidata_lite.parsers.reference_parser import parse_references, parse_reference
from wikidata_lite.parsers.search_parser import parse_search_response
from wikidata_lite.parsers.serializer import serialize_entity, serialize_snak, serialize_statement
from wikidata_lite.parsers.snak_parser import parse_snak
from wikidata_lite.parsers.statement_parser import parse_statement
from wikidata_lite.parsers.value_parser import parse_datavalue, parse_value

__all__ = [
    "parse_entity",
    "parse_entities_response",
    "parse_qualifiers",
    "parse_qualifier",
    "parse_references",
    "parse_reference",
    "parse_search_response",
    "parse_snak",
    "parse_statement",
    "parse_datavalue",
    "parse_value",
    "serialize_entity",
    "serialize_snak",
    "serialize_statement",
]
