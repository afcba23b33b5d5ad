"""Pydantic model for the metadata document published on a repository site."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MetadataDocumentPayload(BaseModel):
    """``{"items": [...]}``; everything else in the document is ignored."""

    model_config = ConfigDict(extra="ignore")

    items: list[object] = Field(default_factory=list[object])
