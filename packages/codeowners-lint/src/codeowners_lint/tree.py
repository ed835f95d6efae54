from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (".git",)


def normalize_relpath(path: str) -> str:
    return path.replace("\\", "/").lstrip("/")


def _iter_files(root: Path, exclude_dirs: Iterable[str]) -> Iterable[Path]:
    skip = set(exclude_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skip)
        for name in filenames:
            yield Path(dirpath) / name


def list_repo_files(
    root: str | Path, *, exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS
) -> list[str]:
    """Return every file under `root` as a sorted, `/`-separated relative path."""
    base = Path(root)
    if not base.is_dir():
        raise NotADirectoryError(f"repository root is not a directory: {base}")
    rels = {
        normalize_relpath(p.relative_to(base).as_posix())
        for p in _iter_files(base, exclude_dirs)
        if p.is_file()
    }
    return sorted(rels)


def files_named(files: Iterable[str], names: Iterable[str]) -> list[str]:
    wanted = set(names)
    return [rel for rel in files if rel.rsplit("/", 1)[-1] in wanted]
