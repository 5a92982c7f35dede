# tests/test_client.py
import json

import httpx
import pytest

from pkg_appsearch import __version__
from pkg_appsearch.client import AppSearchClient, ClientSettings
from pkg_appsearch.domain.exceptions import ClientError, InvalidDocumentError

API_KEY = "api-mu75psc5egt9ppzuycnc2mc3"


def _client(handler, **settings_kwargs):
    settings = ClientSettings(host_identifier="host-2376rb", api_key=API_KEY, **settings_kwargs)
    calls = []

    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    http = httpx.Client(transport=httpx.MockTransport(recording))
    return AppSearchClient(settings, client=http), calls


def _body(request: httpx.Request):
    return json.loads(request.content) if request.content else None


# --- settings -----------------------------------------------------------


def test_base_url():
    settings = ClientSettings(host_identifier="host-2376rb", api_key=API_KEY)
    assert settings.base_url == "https://host-2376rb.api.swiftype.com/api/as/v1/"

    settings = ClientSettings("host-2376rb", API_KEY, base_url_format="http://localhost:3002/%s/api")
    assert settings.base_url == "http://localhost:3002/host-2376rb/api/"

    assert API_KEY not in repr(settings)


# --- transport ----------------------------------------------------------


def test_request_headers():
    client, calls = _client(lambda r: httpx.Response(200, json={"name": "books"}))
    client.get_engine("books")

    request = calls[0]
    assert request.method == "GET"
    assert str(request.url) == "https://host-2376rb.api.swiftype.com/api/as/v1/engines/books"
    assert request.headers["Authorization"] == f"Bearer {API_KEY}"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-Swiftype-Client"] == "swiftype-app-search-python"
    assert request.headers["X-Swiftype-Client-Version"] == __version__
    assert _body(request) is None


def test_error_status_raises_client_error():
    client, _ = _client(lambda r: httpx.Response(404, text='{"errors":["Could not find engine."]}'))
    with pytest.raises(ClientError) as excinfo:
        client.get_engine("missing")
    assert str(excinfo.value) == 'Error: 404 {"errors":["Could not find engine."]}'


def test_transport_failure_raises_client_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = _client(handler)
    with pytest.raises(ClientError) as excinfo:
        client.list_engines()
    assert isinstance(excinfo.value.__cause__, httpx.HTTPError)


def test_invalid_json_response():
    client, _ = _client(lambda r: httpx.Response(200, text="<html>"))
    with pytest.raises(ClientError):
        client.get_engine("books")


# --- search -------------------------------------------------------------


def test_search_merges_options_and_query():
    client, calls = _client(lambda r: httpx.Response(200, json={"results": []}))
    result = client.search("books", "cat", {"page": {"size": 5}, "query": "ignored"})

    assert result == {"results": []}
    assert calls[0].method == "GET"
    assert calls[0].url.path == "/api/as/v1/engines/books/search"
    assert _body(calls[0]) == {"page": {"size": 5}, "query": "cat"}


def test_multi_search():
    client, calls = _client(lambda r: httpx.Response(200, json=[{"results": []}, {"results": []}]))
    result = client.multi_search("books", [{"query": "cat"}, {"query": "dog"}])

    assert len(result) == 2
    assert calls[0].method == "POST"
    assert calls[0].url.path == "/api/as/v1/engines/books/multi_search"
    assert _body(calls[0]) == {"queries": [{"query": "cat"}, {"query": "dog"}]}


def test_query_suggestion():
    client, calls = _client(lambda r: httpx.Response(200, json={"results": {"documents": []}}))
    client.query_suggestion("books", "ca", {"size": 3})

    assert calls[0].method == "POST"
    assert calls[0].url.path == "/api/as/v1/engines/books/query_suggestion"
    assert _body(calls[0]) == {"size": 3, "query": "ca"}


# --- engines ------------------------------------------------------------


def test_list_engines_defaults():
    client, calls = _client(lambda r: httpx.Response(200, json={"results": []}))
    client.list_engines()
    assert calls[0].url.path == "/api/as/v1/engines"
    assert _body(calls[0]) == {"page": {"current": 1, "size": 20}}

    client.list_engines(current=2, size=5)
    assert _body(calls[1]) == {"page": {"current": 2, "size": 5}}


def test_create_and_destroy_engine():
    def handler(request):
        if request.method == "POST":
            return httpx.Response(200, json={"name": "books"})
        return httpx.Response(200, json={"deleted": True})

    client, calls = _client(handler)
    assert client.create_engine("books") == {"name": "books"}
    assert _body(calls[0]) == {"name": "books"}

    assert client.destroy_engine("books") == {"deleted": True}
    assert calls[1].method == "DELETE"
    assert calls[1].url.path == "/api/as/v1/engines/books"


def test_engine_name_is_quoted():
    client, calls = _client(lambda r: httpx.Response(200, json={}))
    client.get_engine("a/b")
    assert calls[0].url.raw_path == b"/api/as/v1/engines/a%2Fb"


# --- documents ----------------------------------------------------------


def test_index_document():
    client, calls = _client(lambda r: httpx.Response(200, json=[{"id": "1", "errors": []}]))
    assert client.index_document("books", {"id": "1", "title": "Dune"}) == {"id": "1"}
    assert calls[0].method == "POST"
    assert calls[0].url.path == "/api/as/v1/engines/books/documents"
    assert _body(calls[0]) == [{"id": "1", "title": "Dune"}]


def test_index_document_with_errors():
    response = [{"id": None, "errors": ["Missing id", "Invalid field"]}]
    client, _ = _client(lambda r: httpx.Response(200, json=response))
    with pytest.raises(InvalidDocumentError) as excinfo:
        client.index_document("books", {"title": "Dune"})
    assert str(excinfo.value) == "Invalid document: Missing id; Invalid field"


def test_index_document_with_structured_errors():
    response = [{"id": "1", "errors": [{"field": "title"}, 42]}]
    client, _ = _client(lambda r: httpx.Response(200, json=response))
    with pytest.raises(InvalidDocumentError) as excinfo:
        client.index_document("books", {"id": "1"})
    assert str(excinfo.value) == "Invalid document: {'field': 'title'}; 42"


def test_get_and_destroy_documents():
    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json=[{"id": "1"}, None])
        return httpx.Response(200, json=[{"id": "1", "deleted": True}])

    client, calls = _client(handler)
    assert client.get_documents("books", ["1", "2"]) == [{"id": "1"}, None]
    assert _body(calls[0]) == ["1", "2"]

    assert client.destroy_documents("books", ["1"]) == [{"id": "1", "deleted": True}]
    assert calls[1].method == "DELETE"
    assert _body(calls[1]) == ["1"]


# --- signed search keys -------------------------------------------------


def test_create_signed_search_key():
    token = AppSearchClient.create_signed_search_key(API_KEY, "my-token-name", {"query": "cat"})
    assert token == (
        "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"
        ".eyJxdWVyeSI6ImNhdCIsImFwaV9rZXlfbmFtZSI6Im15LXRva2VuLW5hbWUifQ"
        ".hhdpalMFuWwuhsVBpHr9piQpg9ISo7xkxp0vSe8Fb50"
    )


def test_context_manager_closes_http_client():
    client, _ = _client(lambda r: httpx.Response(200, json={}))
    with client as c:
        c.get_engine("books")
    assert client._client.is_closed
