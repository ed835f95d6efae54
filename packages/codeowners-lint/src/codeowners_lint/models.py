from __future__ import annotations

from pydantic import BaseModel, Field


class CheckResult(BaseModel):
    check_id: str
    title: str
    passed: bool
    violations: list[str] = Field(default_factory=list)


class LintReport(BaseModel):
    repo_root: str
    codeowners_path: str
    entry_count: int
    file_count: int
    results: list[CheckResult] = Field(default_factory=list)

    @property
    def all_pass(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]
