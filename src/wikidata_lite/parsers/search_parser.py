import logging
from typing import Any

from pydantic import ValidationError

from wikidata_lite.errors import ParseError
from wikidata_lite.models.internal_representation.search import (
    SearchInfo,
    SearchResponse,
    SearchResult,
)

logger = logging.getLogger(__name__)


def parse_search_response(response_json: Any) -> SearchResponse:
    """Parse a ``wbsearchentities`` response.

    Results that fail validation (no id, wrong field types) are skipped.
    """
    if not isinstance(response_json, dict):
        raise ParseError(f"Search response must be an object, got {type(response_json).__name__}")

    results = []
    for result_json in response_json.get("search") or []:
        try:
            results.append(SearchResult.model_validate(result_json))
        except ValidationError as e:
            logger.debug(f"Skipping malformed search result {result_json!r}: {e}")

    searchinfo = None
    searchinfo_json = response_json.get("searchinfo") or response_json.get("search-info")
    if isinstance(searchinfo_json, dict):
        try:
            searchinfo = SearchInfo.model_validate(searchinfo_json)
        except ValidationError as e:
            logger.debug(f"Ignoring malformed searchinfo: {e}")

    search_continue = response_json.get("search-continue")

    return SearchResponse(
        success=response_json.get("success") in (1, "1"),
        search=results,
        searchinfo=searchinfo,
        search_continue=search_continue if isinstance(search_continue, int) else None,
    )
