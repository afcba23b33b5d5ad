"""GitHub REST API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .http_resilience import DEFAULT_TIMEOUT_SECONDS, RateLimit, ResilienceConfig

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_ACCEPT = "application/vnd.github+json"


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Holds GitHub API configuration values."""

    token: str
    resilience: ResilienceConfig

    def auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "Accept": GITHUB_ACCEPT,
        }


def get_github_config(
    token: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    resilience: ResilienceConfig | None = None,
) -> GitHubConfig:
    return GitHubConfig(
        token=token,
        resilience=resilience
        or ResilienceConfig(
            name="github",
            base_url=GITHUB_API_BASE_URL,
            timeout_seconds=timeout_seconds,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        ),
    )
