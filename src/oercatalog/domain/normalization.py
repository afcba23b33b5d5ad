"""Map raw metadata records onto the catalog item schema."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from .model import DEFAULT_LICENSE, CatalogItem, site_base_url

if TYPE_CHECKING:
    from .model import Repository

Presence = Callable[[object], bool]
Candidate = tuple[object, Presence]

_WHITESPACE = re.compile(r"\s+")


def is_truthy(value: object) -> bool:
    """Present unless null, blank text, zero or ``False``."""

    if isinstance(value, str):
        return value != ""
    return bool(value) if isinstance(value, (bool, int, float)) else value is not None


def is_not_null(value: object) -> bool:
    return value is not None


def first_present(candidates: tuple[Candidate, ...], default: object = None) -> object:
    """Return the first candidate value accepted by its presence predicate."""

    for value, is_present in candidates:
        if is_present(value):
            return value
    return default


def slugify(text: str) -> str:
    return _WHITESPACE.sub("-", text.lower())


def _text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_text(value: object) -> str | None:
    return None if value is None else _text(value)


def _array(value: object) -> list[object]:
    return list(value) if isinstance(value, list) else []


def normalize_item(raw: Mapping[str, object], repository: Repository, org: str) -> CatalogItem:
    """Build a catalog item from an untrusted record.

    Every field has a fallback, so sparse or malformed input degrades to
    defaults instead of raising.
    """

    raw_title = raw.get("title")
    slug_source = first_present(((raw_title, is_truthy),), default="item")
    title = first_present(((raw_title, is_truthy),), default=repository.name)
    item_id = first_present(
        ((raw.get("id"), is_truthy),),
        default=f"{repository.name}-{slugify(_text(slug_source))}",
    )
    page_url = first_present(
        (
            (raw.get("page_url"), is_truthy),
            (raw.get("site_url"), is_truthy),
        ),
        default=site_base_url(org, repository.name),
    )
    license_name = first_present(((raw.get("license"), is_truthy),), default=DEFAULT_LICENSE)

    return CatalogItem(
        id=_text(item_id),
        title=_text(title),
        course_code=_optional_text(first_present(((raw.get("course_code"), is_not_null),))),
        page_url=_text(page_url),
        summary=_optional_text(first_present(((raw.get("summary"), is_not_null),))),
        topics=_array(raw.get("topics")),
        software=_array(raw.get("software")),
        keywords=_array(raw.get("keywords")),
        license=_text(license_name),
        learning_outcomes=_array(raw.get("learning_outcomes")),
        blooms_verbs=_array(raw.get("blooms_verbs")),
        blooms_levels=_array(raw.get("blooms_levels")),
        repo_name=repository.name,
        repo_url=repository.html_url,
    )


__all__ = [
    "first_present",
    "is_not_null",
    "is_truthy",
    "normalize_item",
    "slugify",
]
