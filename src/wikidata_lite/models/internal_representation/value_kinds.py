from enum import Enum


class ValueKind(str, Enum):
    ENTITY = "entity"
    STRING = "string"
    TIME = "time"
    QUANTITY = "quantity"
    GLOBE = "globe"
    MONOLINGUAL = "monolingual"
    EXTERNAL_ID = "external_id"
    COMMONS_MEDIA = "commons_media"
    URL = "url"
    UNKNOWN = "unknown"
