"""Pydantic models describing the GitHub REST API payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RepositoryPayload(GitHubBaseModel):
    name: str
    full_name: str | None = None
    html_url: str = ""
    default_branch: str | None = None
    private: bool = False
    archived: bool = False


class ContentsPayload(GitHubBaseModel):
    type: str | None = None
    name: str | None = None
    path: str | None = None
    sha: str | None = None
    size: int | None = None
    download_url: str | None = None
