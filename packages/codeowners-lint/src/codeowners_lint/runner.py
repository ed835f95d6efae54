from __future__ import annotations

from .checks import (
    check_files_have_owners,
    check_owners_are_teams,
    check_owners_include_team,
    check_patterns_are_used,
)
from .config import (
    CHECK_FILES_HAVE_OWNERS,
    CHECK_OWNERS_ARE_TEAMS,
    CHECK_OWNERS_INCLUDE_TEAM,
    CHECK_PATTERNS_ARE_USED,
    LintConfig,
    resolve_codeowners_path,
)
from .models import CheckResult, LintReport
from .parser import read_codeowners
from .tree import files_named, list_repo_files


def run_lint(config: LintConfig) -> LintReport:
    """Validate the repository's CODEOWNERS file against its file tree.

    The declarations file is read and the tree enumerated once; each selected
    check then runs independently. Missing inputs raise instead of reporting.
    """
    codeowners_path = resolve_codeowners_path(config)
    entries = read_codeowners(codeowners_path)
    files = list_repo_files(config.repo_root, exclude_dirs=config.exclude_dirs)
    owned_files = files_named(files, config.owned_file_names)

    results: list[CheckResult] = []
    for check_id in config.checks:
        if check_id == CHECK_OWNERS_ARE_TEAMS:
            results.append(check_owners_are_teams(entries))
        elif check_id == CHECK_OWNERS_INCLUDE_TEAM:
            results.append(
                check_owners_include_team(entries, team=config.reviewer_team)
            )
        elif check_id == CHECK_PATTERNS_ARE_USED:
            results.append(check_patterns_are_used(entries, files))
        elif check_id == CHECK_FILES_HAVE_OWNERS:
            results.append(check_files_have_owners(entries, owned_files))

    return LintReport(
        repo_root=str(config.repo_root),
        codeowners_path=str(codeowners_path),
        entry_count=len(entries),
        file_count=len(files),
        results=results,
    )
