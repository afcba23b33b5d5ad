from __future__ import annotations

import asyncio
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from oercatalog.adapters.http_resilience import ResilientClient
from oercatalog.adapters.pages import SiteMetadataProbe, fetch_json_if_exists
from oercatalog.config import ResilienceConfig, get_pages_config
from oercatalog.domain.ports.fetching import Found, Missing
from tests.helpers.catalog import make_client_factory, make_repository

ROOT_URL = "https://acme.github.io/lab1/oer-assignments.json"
DOCS_URL = "https://acme.github.io/lab1/docs/oer-assignments.json"


def _probe(handler: Callable[[httpx.Request], httpx.Response]) -> SiteMetadataProbe:
    return SiteMetadataProbe(
        config=get_pages_config("acme"),
        client_factory=make_client_factory(handler),
    )


def test_candidate_urls_follow_site_convention() -> None:
    assert get_pages_config("acme").candidate_urls("lab1") == [ROOT_URL, DOCS_URL]


def test_probe_uses_first_candidate_with_items() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json={"items": [{"title": "Intro"}]})

    document = _probe(handler)(make_repository("lab1"))

    assert document is not None
    assert document.url == ROOT_URL
    assert document.items == [{"title": "Intro"}]
    assert requested == [ROOT_URL]


def test_probe_falls_through_to_docs_path() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        if str(request.url) == ROOT_URL:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json={"items": [{"title": "Docs"}, {"title": "More"}]})

    document = _probe(handler)(make_repository("lab1"))

    assert document is not None
    assert document.url == DOCS_URL
    assert [item["title"] for item in document.items] == ["Docs", "More"]
    assert requested == [ROOT_URL, DOCS_URL]


@pytest.mark.parametrize(
    "root_response",
    [
        httpx.Response(200, json={"items": []}),
        httpx.Response(200, json={"title": "no items key"}),
        httpx.Response(200, json={"items": "not-a-list"}),
        httpx.Response(200, json=[{"title": "top-level list"}]),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="[" * 200_000 + "]" * 200_000),
    ],
)
def test_unusable_root_document_moves_to_next_candidate(root_response: httpx.Response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == ROOT_URL:
            return root_response
        return httpx.Response(200, json={"items": [{"title": "Docs"}]})

    document = _probe(handler)(make_repository("lab1"))

    assert document is not None
    assert document.url == DOCS_URL


def test_probe_returns_none_when_nothing_is_published() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(404)

    assert _probe(handler)(make_repository("lab1")) is None
    assert requested == [ROOT_URL, DOCS_URL]


def test_probe_swallows_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    assert _probe(handler)(make_repository("lab1")) is None


def test_probe_drops_non_object_items() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": ["loose string", {"title": "Kept"}, 3]})

    document = _probe(handler)(make_repository("lab1"))

    assert document is not None
    assert document.items == [{"title": "Kept"}]


def test_fetch_json_if_exists_reports_outcomes() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/ok.json":
            return httpx.Response(200, json={"items": [1]})
        return httpx.Response(410)

    async def run() -> tuple[object, object]:
        async with ResilientClient(
            ResilienceConfig(name="test"),
            transport=httpx.MockTransport(handler),
        ) as client:
            found = await fetch_json_if_exists(client, "https://example.org/ok.json")
            missing = await fetch_json_if_exists(client, "https://example.org/gone.json")
        return found, missing

    found, missing = asyncio.run(run())

    assert found == Found({"items": [1]})
    assert isinstance(missing, Missing)
    assert missing.reason == "HTTP 410"
