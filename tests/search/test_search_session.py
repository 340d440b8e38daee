import asyncio
import threading

import pytest
from conftest import FakeWikidataClient

from wikidata_lite.errors import NetworkError
from wikidata_lite.search import SearchSession, SearchState
from wikidata_lite.search.search_session import SEARCH_FAILED_MESSAGE


def _session(client, **kwargs):
    options = {"language": "en", "suggestion_delay": 0.05, "suggestion_limit": 10, "page_size": 20}
    options.update(kwargs)
    return SearchSession(client, **options)


@pytest.mark.asyncio
async def test_rapid_typing_sends_one_suggestion_request():
    """Keystrokes inside the debounce window collapse into one request."""
    client = FakeWikidataClient()
    session = _session(client)

    session.update_query("a")
    session.update_query("ab")
    task = session.update_query("abc")
    await task

    assert [call["query"] for call in client.search_calls] == ["abc"]
    assert client.search_calls[0]["limit"] == 10
    assert client.search_calls[0]["offset"] == 0
    assert [result.label for result in session.state.suggestions] == ["abc"]
    assert session.state.suggestion_state == SearchState.SUCCESS
    await session.aclose()


@pytest.mark.asyncio
async def test_blank_query_clears_suggestions_without_request():
    """A blank query clears suggestions and sends nothing."""
    client = FakeWikidataClient()
    session = _session(client)

    await session.update_query("douglas")
    assert len(session.state.suggestions) == 1

    assert session.update_query("   ") is None
    assert session.state.suggestions == []
    assert not session.state.is_suggestions_loading
    assert len(client.search_calls) == 1
    await session.aclose()


@pytest.mark.asyncio
async def test_blank_query_cancels_pending_suggestions():
    """Clearing the query drops a pending debounced request."""
    client = FakeWikidataClient()
    session = _session(client, suggestion_delay=0.1)

    pending = session.update_query("dou")
    session.update_query("")
    await asyncio.sleep(0.2)

    assert pending.cancelled()
    assert client.search_calls == []
    assert session.state.suggestions == []
    await session.aclose()


@pytest.mark.asyncio
async def test_stale_search_response_is_discarded():
    """A slow response for an old query never replaces newer results."""
    started = threading.Event()
    release = threading.Event()

    def search(query, offset, **kwargs):
        if query == "slow":
            started.set()
            release.wait(5)
        return {"success": 1, "search": [{"id": "Q1", "label": query}]}

    client = FakeWikidataClient(search=search)
    session = _session(client)
    try:
        session.submit("slow")
        assert await asyncio.to_thread(started.wait, 5)

        await session.submit("fast")
        assert [result.label for result in session.state.results] == ["fast"]
    finally:
        release.set()

    await asyncio.sleep(0.05)
    assert [result.label for result in session.state.results] == ["fast"]
    assert session.state.search_state == SearchState.SUCCESS
    await session.aclose()


@pytest.mark.asyncio
async def test_search_clears_suggestions():
    """An explicit search hides the suggestion list."""
    client = FakeWikidataClient()
    session = _session(client)

    await session.update_query("douglas")
    assert session.state.suggestions

    await session.submit("douglas")
    assert session.state.suggestions == []
    assert session.state.results[0].id == "Q1"
    assert client.search_calls[-1]["limit"] == 20
    await session.aclose()


@pytest.mark.asyncio
async def test_search_pagination():
    """Pages move by page size and never go below zero."""
    client = FakeWikidataClient()
    session = _session(client, page_size=20)

    await session.submit("cat")
    await session.previous_page()
    assert session.state.offset == 0

    await session.search(40)
    assert session.state.offset == 40
    await session.previous_page()
    assert session.state.offset == 20
    await session.load_more()
    assert session.state.offset == 40

    assert [call["offset"] for call in client.search_calls] == [0, 0, 40, 20, 40]
    assert session.state.results[0].id == "Q41"
    await session.aclose()


@pytest.mark.asyncio
async def test_search_without_success_flag():
    """A response without the success flag yields no results and an error."""
    client = FakeWikidataClient(search=lambda **call: {"search": [{"id": "Q1", "label": "x"}]})
    session = _session(client)

    await session.submit("anything")

    assert session.state.results == []
    assert session.state.error == SEARCH_FAILED_MESSAGE
    assert session.state.search_state == SearchState.FAILURE
    await session.aclose()


@pytest.mark.asyncio
async def test_search_network_failure():
    """A transport failure yields no results and the failure message."""

    def search(**call):
        raise NetworkError("Network error: timed out")

    client = FakeWikidataClient(search=search)
    session = _session(client)

    await session.submit("anything")

    assert session.state.results == []
    assert session.state.error == "Network error: timed out"
    assert not session.state.is_searching

    session.clear_error()
    assert session.state.error is None
    await session.aclose()


@pytest.mark.asyncio
async def test_blank_search_resets_results():
    """Searching a blank query clears results without a request."""
    client = FakeWikidataClient()
    session = _session(client)

    await session.submit("cat")
    assert session.submit("  ") is None

    assert session.state.results == []
    assert session.state.offset == 0
    assert len(client.search_calls) == 1
    await session.aclose()


@pytest.mark.asyncio
async def test_late_suggestion_response_is_discarded():
    """Suggestions for an older prefix never replace the latest ones."""
    started = threading.Event()
    release = threading.Event()

    def search(query, offset, **kwargs):
        if query == "a":
            started.set()
            release.wait(5)
        return {"success": 1, "search": [{"id": "Q1", "label": query}]}

    client = FakeWikidataClient(search=search)
    session = _session(client, suggestion_delay=0)
    try:
        session.update_query("a")
        assert await asyncio.to_thread(started.wait, 5)

        await session.update_query("abc")
        assert [result.label for result in session.state.suggestions] == ["abc"]
    finally:
        release.set()

    await asyncio.sleep(0.05)
    assert [call["query"] for call in client.search_calls] == ["a", "abc"]
    assert [result.label for result in session.state.suggestions] == ["abc"]
    assert session.state.suggestion_state == SearchState.SUCCESS
    await session.aclose()
