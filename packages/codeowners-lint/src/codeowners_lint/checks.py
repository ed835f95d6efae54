from __future__ import annotations

from typing import Iterable, Mapping

from .config import (
    CHECK_FILES_HAVE_OWNERS,
    CHECK_OWNERS_ARE_TEAMS,
    CHECK_OWNERS_INCLUDE_TEAM,
    CHECK_PATTERNS_ARE_USED,
)
from .models import CheckResult
from .parser import OwnershipEntry
from .patterns import matches


def _result(*, check_id: str, title: str, violations: list[str]) -> CheckResult:
    return CheckResult(
        check_id=check_id,
        title=title,
        passed=not violations,
        violations=violations,
    )


def check_owners_are_teams(entries: Mapping[str, OwnershipEntry]) -> CheckResult:
    """Every owner must be a team handle (`@org/team`), not an individual."""
    non_team: list[str] = []
    for entry in entries.values():
        for owner in entry.owner_handles:
            if "/" not in owner:
                non_team.append(owner)
    return _result(
        check_id=CHECK_OWNERS_ARE_TEAMS,
        title="Owners are teams",
        violations=non_team,
    )


def check_owners_include_team(
    entries: Mapping[str, OwnershipEntry], *, team: str
) -> CheckResult:
    missing = [
        e.source_pattern for e in entries.values() if team not in e.owner_handles
    ]
    return _result(
        check_id=CHECK_OWNERS_INCLUDE_TEAM,
        title=f"Owners include {team}",
        violations=missing,
    )


def check_patterns_are_used(
    entries: Mapping[str, OwnershipEntry], files: Iterable[str]
) -> CheckResult:
    """Every declared pattern must match at least one file in the repository."""
    all_files = list(files)
    unused: list[str] = []
    for entry in entries.values():
        if not any(matches(entry.pattern, f) for f in all_files):
            unused.append(entry.source_pattern)
    return _result(
        check_id=CHECK_PATTERNS_ARE_USED,
        title="Paths are used",
        violations=unused,
    )


def check_files_have_owners(
    entries: Mapping[str, OwnershipEntry], files: Iterable[str]
) -> CheckResult:
    patterns = list(entries)
    orphans = [f for f in files if not any(matches(p, f) for p in patterns)]
    return _result(
        check_id=CHECK_FILES_HAVE_OWNERS,
        title="Files have owners",
        violations=orphans,
    )
