from enum import Enum


class Datatype(str, Enum):
    WIKIBASE_ITEM = "wikibase-item"
    WIKIBASE_PROPERTY = "wikibase-property"
    WIKIBASE_LEXEME = "wikibase-lexeme"
    WIKIBASE_FORM = "wikibase-form"
    WIKIBASE_SENSE = "wikibase-sense"
    STRING = "string"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBE_COORDINATE = "globe-coordinate"
    MONOLINGUALTEXT = "monolingualtext"
    EXTERNAL_ID = "external-id"
    COMMONS_MEDIA = "commonsMedia"
    URL = "url"


class DatavalueType(str, Enum):
    """The ``datavalue.type`` tag, used when a snak carries no ``datatype``"""

    WIKIBASE_ENTITYID = "wikibase-entityid"
    STRING = "string"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBECOORDINATE = "globecoordinate"
    MONOLINGUALTEXT = "monolingualtext"


ENTITY_DATATYPES = frozenset(
    {
        Datatype.WIKIBASE_ITEM.value,
        Datatype.WIKIBASE_PROPERTY.value,
        Datatype.WIKIBASE_LEXEME.value,
        Datatype.WIKIBASE_FORM.value,
        Datatype.WIKIBASE_SENSE.value,
    }
)
