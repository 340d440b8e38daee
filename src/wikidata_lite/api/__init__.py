from wikidata_lite.api.client import WikidataClient
from wikidata_lite.api.models import ClientConfig

__all__ = [
    "ClientConfig",
    "WikidataClient",
]
