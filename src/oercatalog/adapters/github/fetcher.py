"""Repository listing and fallback lookups backed by the GitHub API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx

from .client import GitHubAPIError, GitHubClient
from .translator import translate_repository

if TYPE_CHECKING:
    from oercatalog.domain.model import Repository

log = getLogger(__name__)

FALLBACK_METADATA_PATH: Final[str] = "oer.yml"


@dataclass(slots=True)
class GitHubRepositoryLister:
    client: GitHubClient

    def __call__(self, org: str) -> list[Repository]:
        payloads = self.client.list_org_repositories(org)
        return [translate_repository(payload) for payload in payloads]


@dataclass(slots=True)
class ContentsFallbackInspector:
    """Check whether a repository carries a repository-level ``oer.yml``.

    The file is only looked up, never parsed; any failure counts as absent.
    """

    client: GitHubClient
    org: str
    path: str = FALLBACK_METADATA_PATH

    def __call__(self, repository: Repository) -> bool:
        try:
            contents = self.client.fetch_contents(
                owner=self.org,
                repo=repository.name,
                path=self.path,
                ref=repository.branch,
            )
        except (GitHubAPIError, httpx.HTTPError, ValueError) as exc:
            log.debug("%s: no %s (%s)", repository.name, self.path, exc)
            return False
        return contents.download_url is not None
