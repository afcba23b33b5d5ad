"""Run configuration for a catalog build."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from oercatalog.domain.model import DuplicateIdPolicy

from .env import env_flag, env_float, env_names, require_env_vars
from .errors import ConfigurationError
from .github import GitHubConfig, get_github_config
from .http_resilience import DEFAULT_TIMEOUT_SECONDS
from .pages import PagesConfig, get_pages_config

DEFAULT_OUTPUT_PATH: Final[Path] = Path("assets") / "assignments.json"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Everything a catalog build needs, resolved once at startup."""

    org: str
    github: GitHubConfig
    pages: PagesConfig
    allowlist: frozenset[str] = frozenset()
    blocklist: frozenset[str] = frozenset()
    output_path: Path = DEFAULT_OUTPUT_PATH
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.KEEP
    fallback_check: bool = True


def parse_duplicate_id_policy(value: str) -> DuplicateIdPolicy:
    try:
        return DuplicateIdPolicy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in DuplicateIdPolicy)
        raise ConfigurationError(
            f"Unsupported duplicate id policy {value!r} (expected one of: {choices})"
        ) from exc


def get_catalog_config() -> CatalogConfig:
    """Build the run configuration from environment variables.

    ``GH_TOKEN`` and ``ORG`` are required; everything else falls back to defaults.
    """

    values = require_env_vars(("GH_TOKEN", "ORG"))
    org = values["ORG"]
    timeout = env_float("HTTP_TIMEOUT_SECONDS", default=DEFAULT_TIMEOUT_SECONDS)

    output = os.getenv("CATALOG_OUTPUT")
    duplicate_ids = os.getenv("CATALOG_DUPLICATE_IDS")

    return CatalogConfig(
        org=org,
        github=get_github_config(values["GH_TOKEN"], timeout_seconds=timeout),
        pages=get_pages_config(org, timeout_seconds=timeout),
        allowlist=env_names("REPO_ALLOWLIST"),
        blocklist=env_names("REPO_BLOCKLIST"),
        output_path=Path(output) if output and output.strip() else DEFAULT_OUTPUT_PATH,
        duplicate_ids=(
            parse_duplicate_id_policy(duplicate_ids)
            if duplicate_ids and duplicate_ids.strip()
            else DuplicateIdPolicy.KEEP
        ),
        fallback_check=env_flag("OER_FALLBACK_CHECK", default=True),
    )
