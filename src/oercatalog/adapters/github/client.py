"""HTTP client for the GitHub REST API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from oercatalog.adapters.http_resilience import ClientFactory, ResilientClient

from .schema import ContentsPayload, RepositoryPayload

if TYPE_CHECKING:
    from oercatalog.config.github import GitHubConfig

log = getLogger(__name__)

REPOSITORIES_PER_PAGE = 100


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API answers with a non-success status or an odd payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        path: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.path = path
        self.body = body


class GitHubClient:
    """Low-level HTTP client for the GitHub REST API.

    Every request is attempted once. A non-success status raises
    :class:`GitHubAPIError` with the status and the response body attached.
    """

    def __init__(
        self,
        *,
        config: GitHubConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def list_org_repositories(
        self,
        org: str,
        *,
        per_page: int = REPOSITORIES_PER_PAGE,
    ) -> list[RepositoryPayload]:
        return asyncio.run(self._list_org_repositories_async(org=org, per_page=per_page))

    def fetch_contents(
        self,
        *,
        owner: str,
        repo: str,
        path: str,
        ref: str,
    ) -> ContentsPayload:
        return asyncio.run(
            self._fetch_contents_async(owner=owner, repo=repo, path=path, ref=ref)
        )

    async def _list_org_repositories_async(
        self,
        *,
        org: str,
        per_page: int,
    ) -> list[RepositoryPayload]:
        repositories: list[RepositoryPayload] = []
        page = 1

        async with self._client_factory(self._resilience) as client:
            while True:
                payload = await self._perform_request(
                    client=client,
                    path=f"/orgs/{org}/repos",
                    params={
                        "per_page": str(per_page),
                        "page": str(page),
                        "type": "public",
                        "sort": "full_name",
                    },
                )
                if not isinstance(payload, list):
                    raise GitHubAPIError(
                        f"Unexpected repository listing payload on page {page}",
                        path=f"/orgs/{org}/repos",
                    )

                batch = [RepositoryPayload.model_validate(entry) for entry in payload]
                repositories.extend(batch)
                log.debug("Fetched repository page %d for %s: %d entries", page, org, len(batch))
                if len(batch) < per_page:
                    break
                page += 1

        return repositories

    async def _fetch_contents_async(
        self,
        *,
        owner: str,
        repo: str,
        path: str,
        ref: str,
    ) -> ContentsPayload:
        request_path = f"/repos/{owner}/{repo}/contents/{path}"
        async with self._client_factory(self._resilience) as client:
            payload = await self._perform_request(
                client=client,
                path=request_path,
                params={"ref": ref},
            )
        if not isinstance(payload, dict):
            raise GitHubAPIError("Unexpected contents payload", path=request_path)
        return ContentsPayload.model_validate(payload)

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        path: str,
        params: dict[str, str],
    ) -> object:
        response = await client.get(path, params=params, headers=self._config.auth_headers())
        if not response.is_success:
            body = response.text
            raise GitHubAPIError(
                f"GitHub API {response.status_code} on {path}: {body}",
                status_code=response.status_code,
                path=path,
                body=body,
            )
        return response.json()
