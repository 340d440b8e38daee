from wikidata_lite.config.settings import Settings, configure_logging, settings

__all__ = [
    "Settings",
    "configure_logging",
    "settings",
]
