"""Translate GitHub payloads into domain entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oercatalog.domain.model import Repository

if TYPE_CHECKING:
    from .schema import RepositoryPayload


def translate_repository(payload: RepositoryPayload) -> Repository:
    return Repository(
        name=payload.name,
        html_url=payload.html_url,
        full_name=payload.full_name,
        default_branch=payload.default_branch,
    )
