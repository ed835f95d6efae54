"""codeowners-lint: validate a CODEOWNERS file against the repository tree."""

from .config import LintConfig
from .models import CheckResult, LintReport
from .parser import OwnershipEntry, owners_for_path, parse_codeowners
from .patterns import matches, translate_pattern
from .runner import run_lint

__all__ = [
    "CheckResult",
    "LintConfig",
    "LintReport",
    "OwnershipEntry",
    "matches",
    "owners_for_path",
    "parse_codeowners",
    "run_lint",
    "translate_pattern",
]
