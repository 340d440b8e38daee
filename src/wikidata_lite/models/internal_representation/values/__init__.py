from .base import Value
from .entity_value import EntityValue
from .string_value import StringValue
from .time_value import TimeValue
from .quantity_value import QuantityValue
from .globe_value import GlobeValue
from .monolingual_value import MonolingualValue
from .external_id_value import ExternalIDValue
from .commons_media_value import CommonsMediaValue
from .url_value import URLValue
from .unknown_value import UnknownValue

__all__ = [
    "Value",
    "EntityValue",
    "StringValue",
    "TimeValue",
    "QuantityValue",
    "GlobeValue",
    "MonolingualValue",
    "ExternalIDValue",
    "CommonsMediaValue",
    "URLValue",
    "UnknownValue",
]
