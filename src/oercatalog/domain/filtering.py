"""Name-based allow/block filtering of listed repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import Repository


@dataclass(frozen=True, slots=True)
class RepositoryFilter:
    """Allow/block rule over repository names.

    An empty allow-set admits every name. The block-set always wins, so a name
    present in both sets is excluded.
    """

    allow: frozenset[str] = frozenset()
    block: frozenset[str] = frozenset()

    def allows(self, name: str) -> bool:
        if self.allow and name not in self.allow:
            return False
        return name not in self.block

    def apply(self, repositories: Iterable[Repository]) -> list[Repository]:
        return [repository for repository in repositories if self.allows(repository.name)]


__all__ = ["RepositoryFilter"]
