"""Public interface for the GitHub adapter."""

from __future__ import annotations

from .client import REPOSITORIES_PER_PAGE, GitHubAPIError, GitHubClient
from .fetcher import FALLBACK_METADATA_PATH, ContentsFallbackInspector, GitHubRepositoryLister
from .schema import ContentsPayload, RepositoryPayload
from .translator import translate_repository

__all__ = [
    "FALLBACK_METADATA_PATH",
    "REPOSITORIES_PER_PAGE",
    "ContentsFallbackInspector",
    "ContentsPayload",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubRepositoryLister",
    "RepositoryPayload",
    "translate_repository",
]
