import asyncio

import httpx
import pytest

from zipproxy.backends.data_api import DataApiBackend, build_search_string
from zipproxy.errors import BackendUnavailable, InvalidResponse

ENDPOINT = "https://data.example.com/app/zips/search"


def _backend(handler) -> DataApiBackend:
    return DataApiBackend(ENDPOINT, "secret-key", transport=httpx.MockTransport(handler))


def test_search_string_matches_uri_component_encoding():
    assert build_search_string({"search": "st. louis & co", "autocomplete": 1}) == (
        "search=st.%20louis%20%26%20co&autocomplete=1"
    )
    assert build_search_string({"search": "o'fallon (mo)!"}) == "search=o'fallon%20(mo)!"
    assert build_search_string({"search": "zürich"}) == "search=z%C3%BCrich"


def test_search_sends_query_and_api_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["api_key"] = request.headers["api-key"]
        return httpx.Response(200, json=[{"zip": "01001", "name": "Springfield"}])

    results = asyncio.run(_backend(handler).search("springfield", True))
    assert seen["url"] == f"{ENDPOINT}?search=springfield&autocomplete=1"
    assert seen["api_key"] == "secret-key"
    assert [result.model_dump() for result in results] == [{"zip": "01001", "name": "Springfield"}]


def test_full_search_flag_is_zero():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["autocomplete"] = request.url.params["autocomplete"]
        return httpx.Response(200, json={"results": []})

    assert asyncio.run(_backend(handler).search("boston", False)) == []
    assert seen["autocomplete"] == "0"


def test_server_error_is_backend_unavailable():
    backend = _backend(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(BackendUnavailable):
        asyncio.run(backend.search("boston", False))


def test_transport_error_is_backend_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(BackendUnavailable):
        asyncio.run(_backend(handler).search("boston", False))


def test_non_json_body_is_invalid_response():
    backend = _backend(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(InvalidResponse):
        asyncio.run(backend.search("boston", False))


def test_missing_endpoint_is_backend_unavailable():
    with pytest.raises(BackendUnavailable):
        asyncio.run(DataApiBackend(None, "secret-key").search("boston", False))


def test_malformed_endpoint_is_backend_unavailable():
    with pytest.raises(BackendUnavailable):
        asyncio.run(DataApiBackend("http://[::1", "secret-key").search("boston", False))
