"""Core of a Wikidata read/write client: entity model, value formatting,
label resolution and the search/suggestion pipeline."""

__version__ = "1.0.0"
