"""Application service that turns an organization's repositories into a catalog."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .aggregation import assemble_catalog, utcnow
from .filtering import RepositoryFilter
from .model import DuplicateIdPolicy
from .normalization import normalize_item

if TYPE_CHECKING:
    from .aggregation import Clock
    from .model import Catalog, CatalogItem
    from .ports.fetching import FallbackInspector, MetadataProbe, RepositoryLister

log = getLogger(__name__)


@dataclass(slots=True)
class BuildCatalogResult:
    """Outcome of a catalog build."""

    catalog: Catalog
    listed: int
    selected: int
    with_items: int


def build_catalog(
    *,
    org: str,
    lister: RepositoryLister,
    probe: MetadataProbe,
    repository_filter: RepositoryFilter | None = None,
    fallback: FallbackInspector | None = None,
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.KEEP,
    clock: Clock = utcnow,
) -> BuildCatalogResult:
    """List, filter, probe and normalize, then assemble the sorted catalog.

    Listing failures propagate and abort the build. Probes never raise; a
    repository without a metadata document contributes nothing.
    """

    active_filter = repository_filter or RepositoryFilter()
    repositories = lister(org)
    selected = active_filter.apply(repositories)
    log.info("Listed %d repositories for %s, %d selected", len(repositories), org, len(selected))

    items: list[CatalogItem] = []
    with_items = 0
    for repository in selected:
        document = probe(repository)
        if document is not None:
            with_items += 1
            log.info("%s: %d items from %s", repository.name, len(document.items), document.url)
            items.extend(normalize_item(raw, repository, org) for raw in document.items)
            continue

        log.debug("%s: no metadata document published", repository.name)
        if fallback is not None and fallback(repository):
            log.debug("%s: repository-level fallback metadata present, not parsed", repository.name)

    catalog = assemble_catalog(org, items, policy=duplicate_ids, clock=clock)
    return BuildCatalogResult(
        catalog=catalog,
        listed=len(repositories),
        selected=len(selected),
        with_items=with_items,
    )


__all__ = ["BuildCatalogResult", "build_catalog"]
