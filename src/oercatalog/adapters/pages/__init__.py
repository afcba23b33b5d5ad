"""Public interface for the published-site probe."""

from __future__ import annotations

from .client import SiteMetadataProbe, fetch_json_if_exists
from .schema import MetadataDocumentPayload

__all__ = [
    "MetadataDocumentPayload",
    "SiteMetadataProbe",
    "fetch_json_if_exists",
]
