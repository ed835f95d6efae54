from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from .patterns import matches, translate_pattern

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class OwnershipEntry:
    pattern: str
    source_pattern: str
    owners: str
    line: int

    @property
    def owner_handles(self) -> list[str]:
        return [o for o in self.owners.split(" ") if o]


def _split_line(line: str) -> tuple[str, str] | None:
    # Only spaces separate the path from its owners; the owners text is kept whole.
    parts = line.lstrip(" ").split(" ", 1)
    if len(parts) < 2:
        return None
    path, owners = parts[0].strip(), parts[1].strip()
    if not path or not owners:
        return None
    return path, owners


def iter_codeowners_entries(text: str) -> Iterable[OwnershipEntry]:
    for idx, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        if not line.strip() or line.startswith("#") or line.startswith("*"):
            continue
        split = _split_line(line)
        if split is None:
            continue
        path, owners = split
        yield OwnershipEntry(
            pattern=translate_pattern(path),
            source_pattern=path,
            owners=owners,
            line=idx,
        )


def parse_codeowners(text: str) -> dict[str, OwnershipEntry]:
    """Parse CODEOWNERS text into entries keyed by translated pattern.

    Blank lines, comments and `*`-prefixed catch-all lines are ignored, as are
    lines without an owners part. A later line whose pattern translates to the
    same expression replaces the earlier entry.
    """
    entries: dict[str, OwnershipEntry] = {}
    for entry in iter_codeowners_entries(text):
        entries[entry.pattern] = entry
    return entries


def read_codeowners(path: str | Path) -> dict[str, OwnershipEntry]:
    return parse_codeowners(Path(path).read_text(encoding="utf-8-sig"))


def owners_by_pattern(entries: Mapping[str, OwnershipEntry]) -> dict[str, str]:
    return {pattern: entry.owners for pattern, entry in entries.items()}


def matching_entries(
    entries: Mapping[str, OwnershipEntry], path: str
) -> list[OwnershipEntry]:
    hits = [e for e in entries.values() if matches(e.pattern, path)]
    hits.sort(key=lambda e: e.line)
    return hits


def owners_for_path(
    entries: Mapping[str, OwnershipEntry], path: str
) -> OwnershipEntry | None:
    """Return the entry that owns `path`: the last matching line wins."""
    hits = matching_entries(entries, path)
    return hits[-1] if hits else None
