"""Static-site probe configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from oercatalog.domain.model import site_base_url

from .http_resilience import DEFAULT_TIMEOUT_SECONDS, ResilienceConfig

METADATA_FILENAME = "oer-assignments.json"
CANDIDATE_DIRECTORIES = ("", "docs/")


@dataclass(frozen=True, slots=True)
class PagesConfig:
    org: str
    resilience: ResilienceConfig
    filename: str = METADATA_FILENAME
    directories: tuple[str, ...] = CANDIDATE_DIRECTORIES

    def candidate_urls(self, repo_name: str) -> list[str]:
        base = site_base_url(self.org, repo_name)
        return [f"{base}{directory}{self.filename}" for directory in self.directories]


def get_pages_config(
    org: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> PagesConfig:
    return PagesConfig(
        org=org,
        resilience=ResilienceConfig(name="pages", timeout_seconds=timeout_seconds),
    )
