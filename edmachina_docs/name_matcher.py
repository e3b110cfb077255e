"""Fuzzy lookup of documentation files by component name."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class MatchCandidate:
    full_path: str
    relative_path: str
    stem: str
    parent_dir: str

    @classmethod
    def from_relative_path(cls, relative_path: str, root: str) -> "MatchCandidate":
        """Derive a candidate from a path relative to the documentation root."""
        parts = relative_path.split("/")
        return cls(
            full_path=root + relative_path,
            relative_path=relative_path,
            stem=parts[-1].removesuffix(".md"),
            parent_dir=parts[-2] if len(parts) > 1 else "",
        )


def match(candidates: Iterable[MatchCandidate], query: str) -> list[MatchCandidate]:
    """Return candidates whose stem or parent folder contains the query.

    Case-insensitive substring match, no ranking. Input order is kept.
    """
    needle = query.lower()
    return [
        c for c in candidates
        if needle in c.stem.lower() or needle in c.parent_dir.lower()
    ]
