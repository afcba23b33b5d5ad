from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from oercatalog.config import CatalogConfig, get_github_config, get_pages_config

if TYPE_CHECKING:
    from pathlib import Path

_CATALOG_ENV_VARS = (
    "GH_TOKEN",
    "ORG",
    "REPO_ALLOWLIST",
    "REPO_BLOCKLIST",
    "CATALOG_OUTPUT",
    "CATALOG_DUPLICATE_IDS",
    "HTTP_TIMEOUT_SECONDS",
    "OER_FALLBACK_CHECK",
)


@pytest.fixture(autouse=True)
def clean_catalog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog_config(tmp_path: Path) -> CatalogConfig:
    return CatalogConfig(
        org="acme",
        github=get_github_config("test-token"),
        pages=get_pages_config("acme"),
        output_path=tmp_path / "assets" / "assignments.json",
    )
