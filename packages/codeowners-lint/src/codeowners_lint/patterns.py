from __future__ import annotations

import re
from functools import lru_cache

_LONE_STAR_RE = re.compile(r"(?<!\*)\*(?!\*)")
_STAR_RUN_RE = re.compile(r"\*{2,}")

SEGMENT_WILDCARD = "[^/]*"
ANY = ".*"


def _escape(pattern: str) -> str:
    # Everything is literal except `*`, which later steps rewrite.
    return "*".join(re.escape(piece) for piece in pattern.split("*"))


def translate_pattern(pattern: str) -> str:
    """Translate a CODEOWNERS path pattern into an anchored regular expression.

    - a lone `*` matches within one path segment
    - `/**` matches everything below a directory, `**/` any leading directories
    - a pattern without a leading `/` may match at any depth
    - a trailing `/` matches everything below that directory
    """
    path = _escape(pattern)

    if not path.startswith("*"):
        path = _LONE_STAR_RE.sub(lambda _: SEGMENT_WILDCARD, path)

    path = path.replace("/**", "/" + ANY).replace("**/", ANY + "/")
    # `**` runs not next to a slash would otherwise be a nested quantifier.
    path = _STAR_RUN_RE.sub(lambda _: ANY, path)

    if path.startswith("*"):
        path = f".{path}"
    elif not path.startswith("/") and not path.startswith(ANY):
        path = f"{ANY}{path}"

    if path.endswith("/"):
        path = f"{path}{ANY}"

    return f"^{path}$"


@lru_cache(maxsize=4096)
def compile_pattern(translated: str) -> re.Pattern[str]:
    return re.compile(translated)


def rooted_path(path: str) -> str:
    """Return `path` in the repository-rooted form patterns are matched against."""
    return "/" + path.replace("\\", "/").lstrip("/")


def matches(translated: str, path: str) -> bool:
    return compile_pattern(translated).fullmatch(rooted_path(path)) is not None
