"""Ports for fetching repository listings and published metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from oercatalog.domain.model import Repository

RawItem = dict[str, object]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A best-effort fetch that produced a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Missing:
    """A best-effort fetch that produced nothing; ``reason`` is for debug logs only."""

    reason: str


FetchOutcome: TypeAlias = Found[T] | Missing


@dataclass(frozen=True, slots=True)
class MetadataDocument:
    """Raw items discovered on a repository's published site."""

    url: str
    items: list[RawItem]


@runtime_checkable
class RepositoryLister(Protocol):
    """Return every public repository of an organization, in listing order."""

    def __call__(self, org: str) -> list[Repository]: ...


@runtime_checkable
class MetadataProbe(Protocol):
    """Locate a repository's metadata document, or return ``None``."""

    def __call__(self, repository: Repository) -> MetadataDocument | None: ...


@runtime_checkable
class FallbackInspector(Protocol):
    """Report whether a repository carries repository-level fallback metadata."""

    def __call__(self, repository: Repository) -> bool: ...


__all__ = [
    "FallbackInspector",
    "FetchOutcome",
    "Found",
    "MetadataDocument",
    "MetadataProbe",
    "Missing",
    "RawItem",
    "RepositoryLister",
]
