from typing import Union

from pydantic import Field
from typing_extensions import Annotated

from .commons_media_value import CommonsMediaValue
from .entity_value import EntityValue
from .external_id_value import ExternalIDValue
from .globe_value import GlobeValue
from .monolingual_value import MonolingualValue
from .quantity_value import QuantityValue
from .string_value import StringValue
from .time_value import TimeValue
from .unknown_value import UnknownValue
from .url_value import URLValue

Value = Annotated[
    Union[
        EntityValue,
        StringValue,
        TimeValue,
        QuantityValue,
        GlobeValue,
        MonolingualValue,
        ExternalIDValue,
        CommonsMediaValue,
        URLValue,
        UnknownValue,
    ],
    Field(discriminator="kind"),
]
