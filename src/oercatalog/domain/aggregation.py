"""Sort, de-duplicate and assemble normalized items into a catalog."""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from .model import Catalog, CatalogItem, DuplicateIdPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


class DuplicateItemIdError(ValueError):
    """Raised when the catalog would contain the same item id more than once."""

    def __init__(self, duplicates: Sequence[str]) -> None:
        super().__init__(f"Duplicate catalog item ids: {', '.join(duplicates)}")
        self.duplicates = tuple(duplicates)


def _sort_key(item: CatalogItem) -> tuple[str, str, str, str]:
    code = item.course_code or ""
    # case-insensitive first, raw text breaks ties deterministically
    return (code.casefold(), code, item.title.casefold(), item.title)


def sort_items(items: Iterable[CatalogItem]) -> list[CatalogItem]:
    """Order by course code (missing codes compare as ``""``), then title.

    Both keys compare case-insensitively, so ``"apple"`` sorts before ``"Zonal"``.
    """

    return sorted(items, key=_sort_key)


def apply_duplicate_id_policy(
    items: Sequence[CatalogItem],
    policy: DuplicateIdPolicy,
) -> list[CatalogItem]:
    counts = Counter(item.id for item in items)
    duplicates = sorted(item_id for item_id, count in counts.items() if count > 1)
    if not duplicates:
        return list(items)

    if policy is DuplicateIdPolicy.FAIL:
        raise DuplicateItemIdError(duplicates)

    if policy is DuplicateIdPolicy.KEEP:
        for item_id in duplicates:
            log.warning("Catalog item id %r appears %d times", item_id, counts[item_id])
        return list(items)

    taken = set(counts)
    seen: set[str] = set()
    result: list[CatalogItem] = []
    for item in items:
        if item.id not in seen:
            seen.add(item.id)
            result.append(item)
            continue
        suffix = 2
        while f"{item.id}-{suffix}" in taken:
            suffix += 1
        new_id = f"{item.id}-{suffix}"
        taken.add(new_id)
        log.info("Renamed duplicate catalog item id %r to %r", item.id, new_id)
        result.append(replace(item, id=new_id))
    return result


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_catalog(
    org: str,
    items: Iterable[CatalogItem],
    *,
    policy: DuplicateIdPolicy = DuplicateIdPolicy.KEEP,
    clock: Clock = utcnow,
) -> Catalog:
    ordered = apply_duplicate_id_policy(sort_items(items), policy)
    return Catalog(org=org, generated_at=format_timestamp(clock()), items=tuple(ordered))


__all__ = [
    "Clock",
    "DuplicateItemIdError",
    "apply_duplicate_id_policy",
    "assemble_catalog",
    "format_timestamp",
    "sort_items",
    "utcnow",
]
