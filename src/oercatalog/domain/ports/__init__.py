"""Domain ports."""

from __future__ import annotations

from .fetching import (
    FallbackInspector,
    FetchOutcome,
    Found,
    MetadataDocument,
    MetadataProbe,
    Missing,
    RawItem,
    RepositoryLister,
)

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
