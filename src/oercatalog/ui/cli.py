from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from oercatalog.app import build_org_catalog
from oercatalog.config import (
    ConfigurationError,
    configure_logging,
    get_catalog_config,
    parse_duplicate_id_policy,
    split_names,
)
from oercatalog.domain.model import DuplicateIdPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from oercatalog.config import CatalogConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate oer-assignments.json files published by an organization's sites"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Catalog file to write (defaults to CATALOG_OUTPUT or assets/assignments.json)",
    )
    parser.add_argument(
        "--allow",
        action="append",
        metavar="NAMES",
        help="Comma-separated repository names to include; replaces REPO_ALLOWLIST",
    )
    parser.add_argument(
        "--block",
        action="append",
        metavar="NAMES",
        help="Comma-separated repository names to exclude; replaces REPO_BLOCKLIST",
    )
    parser.add_argument(
        "--duplicate-ids",
        choices=[policy.value for policy in DuplicateIdPolicy],
        help="How to treat repeated item ids (defaults to CATALOG_DUPLICATE_IDS or keep)",
    )
    parser.add_argument(
        "--no-fallback-check",
        action="store_true",
        help="Skip the repository-level oer.yml lookup for repositories without a document",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log probe misses and other debug detail",
    )
    return parser.parse_args(list(argv))


def _names(values: list[str] | None) -> frozenset[str] | None:
    if values is None:
        return None
    return frozenset().union(*(split_names(value) for value in values))


def _apply_overrides(config: CatalogConfig, args: argparse.Namespace) -> CatalogConfig:
    allow = _names(args.allow)
    block = _names(args.block)
    return replace(
        config,
        output_path=args.output if args.output is not None else config.output_path,
        allowlist=allow if allow is not None else config.allowlist,
        blocklist=block if block is not None else config.blocklist,
        duplicate_ids=(
            parse_duplicate_id_policy(args.duplicate_ids)
            if args.duplicate_ids
            else config.duplicate_ids
        ),
        fallback_check=config.fallback_check and not args.no_fallback_check,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        config = _apply_overrides(get_catalog_config(), parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        build_org_catalog(config)
    except Exception:
        log.exception("Fatal error during catalog build")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
