"""Domain entities for the aggregated teaching-resource catalog."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Final

DEFAULT_BRANCH: Final[str] = "main"
DEFAULT_LICENSE: Final[str] = "CC-BY-4.0"


def site_base_url(org: str, repo_name: str) -> str:
    """Return the conventional published-site URL for a repository."""

    return f"https://{org}.github.io/{repo_name}/"


class DuplicateIdPolicy(StrEnum):
    KEEP = "keep"
    FAIL = "fail"
    SUFFIX = "suffix"


@dataclass(frozen=True, slots=True)
class Repository:
    """A public repository of the organization, as reported by the listing API."""

    name: str
    html_url: str = ""
    full_name: str | None = None
    default_branch: str | None = None

    @property
    def branch(self) -> str:
        return self.default_branch or DEFAULT_BRANCH


@dataclass(slots=True)
class CatalogItem:
    """Normalized record for one teaching resource.

    Field order is the key order of the serialized catalog.
    """

    id: str
    title: str
    course_code: str | None
    page_url: str
    summary: str | None
    topics: list[object] = field(default_factory=list[object])
    software: list[object] = field(default_factory=list[object])
    keywords: list[object] = field(default_factory=list[object])
    license: str = DEFAULT_LICENSE
    learning_outcomes: list[object] = field(default_factory=list[object])
    blooms_verbs: list[object] = field(default_factory=list[object])
    blooms_levels: list[object] = field(default_factory=list[object])
    repo_name: str = ""
    repo_url: str = ""


@dataclass(frozen=True, slots=True)
class Catalog:
    org: str
    generated_at: str
    items: tuple[CatalogItem, ...]

    @property
    def item_count(self) -> int:
        return len(self.items)

    def to_document(self) -> dict[str, object]:
        return {
            "org": self.org,
            "generated_at": self.generated_at,
            "item_count": self.item_count,
            "items": [asdict(item) for item in self.items],
        }


__all__ = [
    "DEFAULT_BRANCH",
    "DEFAULT_LICENSE",
    "Catalog",
    "CatalogItem",
    "DuplicateIdPolicy",
    "Repository",
    "site_base_url",
]
