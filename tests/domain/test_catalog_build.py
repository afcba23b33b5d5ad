from __future__ import annotations

from datetime import UTC, datetime

import pytest

from oercatalog.domain.aggregation import DuplicateItemIdError
from oercatalog.domain.catalog_build import build_catalog
from oercatalog.domain.filtering import RepositoryFilter
from oercatalog.domain.model import DuplicateIdPolicy
from tests.helpers.catalog import (
    FakeFallbackInspector,
    FakeMetadataProbe,
    FakeRepositoryLister,
    make_repository,
)

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def test_build_catalog_collects_items_from_repositories_with_documents() -> None:
    lister = FakeRepositoryLister([make_repository("lab1"), make_repository("lab2")])
    probe = FakeMetadataProbe({"lab1": [{"title": "Intro"}]})

    result = build_catalog(org="acme", lister=lister, probe=probe, clock=lambda: FIXED_NOW)

    catalog = result.catalog
    assert lister.calls == ["acme"]
    assert probe.calls == ["lab1", "lab2"]
    assert catalog.item_count == 1
    assert catalog.items[0].title == "Intro"
    assert catalog.items[0].repo_name == "lab1"
    assert catalog.items[0].repo_url == "https://github.com/acme/lab1"
    assert catalog.generated_at == "2026-10-19T12:00:00.000Z"
    assert (result.listed, result.selected, result.with_items) == (2, 2, 1)


def test_build_catalog_skips_filtered_repositories() -> None:
    lister = FakeRepositoryLister(
        [make_repository("lab1"), make_repository("lab2"), make_repository("website")]
    )
    probe = FakeMetadataProbe(
        {"lab1": [{"title": "One"}], "lab2": [{"title": "Two"}], "website": [{"title": "Web"}]}
    )

    result = build_catalog(
        org="acme",
        lister=lister,
        probe=probe,
        repository_filter=RepositoryFilter(block=frozenset({"website", "lab2"})),
    )

    assert probe.calls == ["lab1"]
    assert [item.title for item in result.catalog.items] == ["One"]
    assert result.selected == 1


def test_fallback_only_consulted_without_document() -> None:
    lister = FakeRepositoryLister([make_repository("lab1"), make_repository("lab2")])
    probe = FakeMetadataProbe({"lab1": [{"title": "Intro"}]})
    fallback = FakeFallbackInspector(present={"lab2"})

    result = build_catalog(org="acme", lister=lister, probe=probe, fallback=fallback)

    assert fallback.calls == ["lab2"]
    assert result.catalog.item_count == 1


def test_items_are_sorted_across_repositories() -> None:
    lister = FakeRepositoryLister([make_repository("lab1"), make_repository("lab2")])
    probe = FakeMetadataProbe(
        {
            "lab1": [{"title": "Zeta", "course_code": "B1"}, {"title": "Alpha", "course_code": "B1"}],
            "lab2": [{"title": "Misc"}, {"title": "Basics", "course_code": "A1"}],
        }
    )

    result = build_catalog(org="acme", lister=lister, probe=probe)

    assert [item.title for item in result.catalog.items] == ["Misc", "Basics", "Alpha", "Zeta"]


def test_duplicate_policy_is_applied() -> None:
    lister = FakeRepositoryLister([make_repository("lab1")])
    probe = FakeMetadataProbe({"lab1": [{"title": "Intro"}, {"title": "intro"}]})

    with pytest.raises(DuplicateItemIdError):
        build_catalog(
            org="acme",
            lister=lister,
            probe=probe,
            duplicate_ids=DuplicateIdPolicy.FAIL,
        )


def test_listing_failure_propagates() -> None:
    class BrokenLister:
        def __call__(self, org: str) -> list[object]:
            raise RuntimeError(f"listing failed for {org}")

    probe = FakeMetadataProbe({})

    with pytest.raises(RuntimeError, match="listing failed for acme"):
        build_catalog(org="acme", lister=BrokenLister(), probe=probe)  # type: ignore[arg-type]

    assert probe.calls == []
