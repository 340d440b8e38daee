from wikidata_lite.labels.label_cache import LabelCache, LabelSource

__all__ = [
    "LabelCache",
    "LabelSource",
]
