"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from oercatalog.adapters.catalog_file import write_catalog
from oercatalog.adapters.github import ContentsFallbackInspector, GitHubClient, GitHubRepositoryLister
from oercatalog.adapters.pages import SiteMetadataProbe
from oercatalog.config import get_catalog_config
from oercatalog.domain.catalog_build import BuildCatalogResult, build_catalog
from oercatalog.domain.filtering import RepositoryFilter

if TYPE_CHECKING:
    from oercatalog.adapters.http_resilience import ClientFactory
    from oercatalog.config import CatalogConfig

log = getLogger(__name__)


def build_org_catalog(
    config: CatalogConfig | None = None,
    *,
    client_factory: ClientFactory | None = None,
) -> BuildCatalogResult:
    """Build the organization catalog with the HTTP adapters and write it to disk."""

    effective_config = config or get_catalog_config()
    github = GitHubClient(config=effective_config.github, client_factory=client_factory)
    probe = SiteMetadataProbe(config=effective_config.pages, client_factory=client_factory)
    fallback = (
        ContentsFallbackInspector(client=github, org=effective_config.org)
        if effective_config.fallback_check
        else None
    )

    log.info(
        "Starting catalog build: org=%s, allow=%s, block=%s, output=%s",
        effective_config.org,
        sorted(effective_config.allowlist) or "*",
        sorted(effective_config.blocklist) or "-",
        effective_config.output_path,
    )

    result = build_catalog(
        org=effective_config.org,
        lister=GitHubRepositoryLister(client=github),
        probe=probe,
        repository_filter=RepositoryFilter(
            allow=effective_config.allowlist,
            block=effective_config.blocklist,
        ),
        fallback=fallback,
        duplicate_ids=effective_config.duplicate_ids,
    )

    path = write_catalog(result.catalog, effective_config.output_path)
    log.info(f"Wrote {result.catalog.item_count} lab items to {path}")
    return result
