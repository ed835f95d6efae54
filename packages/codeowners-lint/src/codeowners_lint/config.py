from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator

from .tree import DEFAULT_EXCLUDE_DIRS

DEFAULT_REPO_ROOT = "."
DEFAULT_REVIEWER_TEAM = "@dotnet/dotnet-docker-reviewers"
DEFAULT_OWNED_FILE_NAMES: tuple[str, ...] = ("Dockerfile",)

CODEOWNERS_PATH_CANDIDATES: tuple[str, ...] = (
    "CODEOWNERS",
    ".github/CODEOWNERS",
    "docs/CODEOWNERS",
)

CHECK_OWNERS_ARE_TEAMS = "owners-are-teams"
CHECK_OWNERS_INCLUDE_TEAM = "owners-include-team"
CHECK_PATTERNS_ARE_USED = "patterns-are-used"
CHECK_FILES_HAVE_OWNERS = "files-have-owners"

ALL_CHECKS: tuple[str, ...] = (
    CHECK_OWNERS_ARE_TEAMS,
    CHECK_OWNERS_INCLUDE_TEAM,
    CHECK_PATTERNS_ARE_USED,
    CHECK_FILES_HAVE_OWNERS,
)


class LintConfig(BaseModel):
    repo_root: str = DEFAULT_REPO_ROOT
    codeowners_path: str | None = None
    reviewer_team: str = DEFAULT_REVIEWER_TEAM
    owned_file_names: tuple[str, ...] = DEFAULT_OWNED_FILE_NAMES
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    checks: tuple[str, ...] = ALL_CHECKS

    @field_validator("checks")
    @classmethod
    def _known_checks(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [c for c in value if c not in ALL_CHECKS]
        if unknown:
            raise ValueError(
                f"unknown check(s): {', '.join(unknown)}; "
                f"expected one of: {', '.join(ALL_CHECKS)}"
            )
        return value

    @field_validator("reviewer_team")
    @classmethod
    def _non_empty_team(cls, value: str) -> str:
        team = value.strip()
        if not team:
            raise ValueError("reviewer_team cannot be empty")
        return team


def resolve_codeowners_path(config: LintConfig) -> Path:
    root = Path(config.repo_root)
    if config.codeowners_path is not None:
        p = Path(config.codeowners_path)
        if not p.is_absolute():
            p = root / p
        if not p.is_file():
            raise FileNotFoundError(f"CODEOWNERS file not found: {p}")
        return p

    for rel in CODEOWNERS_PATH_CANDIDATES:
        p = root / rel
        if p.is_file():
            return p
    raise FileNotFoundError(
        f"no CODEOWNERS file under {root} "
        f"(looked for: {', '.join(CODEOWNERS_PATH_CANDIDATES)})"
    )
