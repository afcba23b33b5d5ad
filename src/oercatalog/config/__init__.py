"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    DEFAULT_OUTPUT_PATH,
    CatalogConfig,
    get_catalog_config,
    parse_duplicate_id_policy,
)
from .env import require_env_var, require_env_vars, split_names
from .errors import ConfigurationError, MissingConfigurationError
from .github import GitHubConfig, get_github_config
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .pages import PagesConfig, get_pages_config

__all__ = [
    "DEFAULT_OUTPUT_PATH",
    "CatalogConfig",
    "ConfigurationError",
    "GitHubConfig",
    "MissingConfigurationError",
    "PagesConfig",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "get_catalog_config",
    "get_github_config",
    "get_pages_config",
    "parse_duplicate_id_policy",
    "require_env_var",
    "require_env_vars",
    "split_names",
]
