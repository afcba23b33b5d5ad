"""Best-effort probing of repository sites for a metadata document."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from oercatalog.adapters.http_resilience import ClientFactory, ResilientClient
from oercatalog.domain.ports.fetching import Found, MetadataDocument, Missing

from .schema import MetadataDocumentPayload

if TYPE_CHECKING:
    from oercatalog.config.pages import PagesConfig
    from oercatalog.domain.model import Repository
    from oercatalog.domain.ports.fetching import FetchOutcome

log = getLogger(__name__)


async def fetch_json_if_exists(client: ResilientClient, url: str) -> FetchOutcome[object]:
    """Fetch ``url`` once and parse it as JSON; every failure becomes ``Missing``."""

    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        return Missing(f"{type(exc).__name__}: {exc}")
    if not response.is_success:
        return Missing(f"HTTP {response.status_code}")
    try:
        return Found(response.json())
    except (ValueError, RecursionError):
        return Missing("response is not JSON")


def _document_items(value: object) -> list[object] | None:
    try:
        payload = MetadataDocumentPayload.model_validate(value)
    except ValidationError:
        return None
    return payload.items or None


class SiteMetadataProbe:
    """Try each candidate URL in order and stop at the first non-empty ``items`` array."""

    def __init__(
        self,
        *,
        config: PagesConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def __call__(self, repository: Repository) -> MetadataDocument | None:
        return asyncio.run(self._probe_async(repository))

    async def _probe_async(self, repository: Repository) -> MetadataDocument | None:
        async with self._client_factory(self._resilience) as client:
            for url in self._config.candidate_urls(repository.name):
                outcome = await fetch_json_if_exists(client, url)
                if isinstance(outcome, Missing):
                    log.debug("%s: %s", url, outcome.reason)
                    continue

                items = _document_items(outcome.value)
                if items is None:
                    log.debug("%s: no items", url)
                    continue

                raw_items = [item for item in items if isinstance(item, dict)]
                if len(raw_items) < len(items):
                    log.debug("%s: skipped %d non-object items", url, len(items) - len(raw_items))
                return MetadataDocument(url=url, items=raw_items)
        return None
