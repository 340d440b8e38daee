from enum import Enum


class JsonField(str, Enum):
    ENTITIES = "entities"
    ID = "id"
    TYPE = "type"
    MISSING = "missing"
    LABELS = "labels"
    DESCRIPTIONS = "descriptions"
    ALIASES = "aliases"
    CLAIMS = "claims"
    SITELINKS = "sitelinks"
    LASTREVID = "lastrevid"
    MODIFIED = "modified"
    LANGUAGE = "language"
    VALUE = "value"
    MAINSNAK = "mainsnak"
    RANK = "rank"
    QUALIFIERS = "qualifiers"
    QUALIFIERS_ORDER = "qualifiers-order"
    REFERENCES = "references"
    HASH = "hash"
    SNAKS = "snaks"
    SNAKS_ORDER = "snaks-order"
    SNAKTYPE = "snaktype"
    PROPERTY = "property"
    DATATYPE = "datatype"
    DATAVALUE = "datavalue"
