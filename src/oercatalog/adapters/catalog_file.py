"""Persist the catalog as a single pretty-printed JSON file."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from oercatalog.domain.model import Catalog

log = getLogger(__name__)


def render_catalog(catalog: Catalog) -> str:
    return json.dumps(catalog.to_document(), indent=2, ensure_ascii=False)


def write_catalog(catalog: Catalog, path: Path) -> Path:
    """Write ``catalog`` to ``path``, replacing any previous file.

    The document goes to a sibling temporary file first and is then moved over
    the target, so readers never observe a half-written catalog.
    """

    target = path.expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    staging = target.with_name(f".{target.name}.tmp")
    try:
        staging.write_text(render_catalog(catalog), encoding="utf-8")
        staging.replace(target)
    except OSError:
        staging.unlink(missing_ok=True)
        raise
    log.debug("Catalog written to %s", target)
    return target
