from __future__ import annotations

import json

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from ..config import (
    ALL_CHECKS,
    DEFAULT_OWNED_FILE_NAMES,
    DEFAULT_REPO_ROOT,
    DEFAULT_REVIEWER_TEAM,
    LintConfig,
    resolve_codeowners_path,
)
from ..models import LintReport
from ..parser import OwnershipEntry, matching_entries, read_codeowners
from ..patterns import translate_pattern
from ..runner import run_lint
from ..tree import DEFAULT_EXCLUDE_DIRS, normalize_relpath


app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)


def _build_config(**kwargs: object) -> LintConfig:
    try:
        return LintConfig(**kwargs)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_report(report: LintReport) -> None:
    print(f"[bold]codeowners[/bold] {escape(report.codeowners_path)}")
    print(
        f"[bold]entries[/bold] {report.entry_count} "
        f"[bold]files[/bold] {report.file_count}"
    )
    for result in report.results:
        if result.passed:
            print(f"[green]PASS[/green] {escape(result.title)}")
            continue
        print(
            f"[red]FAIL[/red] {escape(result.title)} "
            f"({len(result.violations)} violation(s))"
        )
        for item in result.violations:
            print(f"  - {escape(item)}")


@app.command()
def check(
    repo_root: str = typer.Option(
        DEFAULT_REPO_ROOT,
        envvar="CODEOWNERS_LINT_REPO_ROOT",
        help="Repository root to validate",
    ),
    codeowners: str | None = typer.Option(
        None, help="CODEOWNERS file; defaults to the first standard location found"
    ),
    reviewer_team: str = typer.Option(
        DEFAULT_REVIEWER_TEAM,
        envvar="CODEOWNERS_LINT_REVIEWER_TEAM",
        help="Team handle every entry must include",
    ),
    owned_file: list[str] = typer.Option(
        list(DEFAULT_OWNED_FILE_NAMES),
        "--owned-file",
        help="File name(s) that must each be covered by an entry",
    ),
    exclude_dir: list[str] = typer.Option(
        list(DEFAULT_EXCLUDE_DIRS),
        "--exclude-dir",
        help="Directory name(s) skipped while walking the tree",
    ),
    check_id: list[str] = typer.Option(
        list(ALL_CHECKS),
        "--check",
        help=f"Check(s) to run: {' | '.join(ALL_CHECKS)}",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the report as JSON"),
):
    """Validate CODEOWNERS entries against the repository file tree."""
    cfg = _build_config(
        repo_root=repo_root,
        codeowners_path=codeowners,
        reviewer_team=reviewer_team,
        owned_file_names=tuple(owned_file),
        exclude_dirs=tuple(exclude_dir),
        checks=tuple(check_id),
    )
    try:
        report = run_lint(cfg)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    if as_json:
        payload = report.model_dump(mode="json")
        payload["all_pass"] = report.all_pass
        typer.echo(json.dumps(payload, sort_keys=True, ensure_ascii=True, indent=2))
    else:
        _print_report(report)

    if not report.all_pass:
        raise typer.Exit(code=1)


def _load_entries(
    repo_root: str, codeowners: str | None
) -> dict[str, OwnershipEntry]:
    cfg = _build_config(repo_root=repo_root, codeowners_path=codeowners)
    try:
        return read_codeowners(resolve_codeowners_path(cfg))
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def entries(
    repo_root: str = typer.Option(
        DEFAULT_REPO_ROOT,
        envvar="CODEOWNERS_LINT_REPO_ROOT",
        help="Repository root",
    ),
    codeowners: str | None = typer.Option(None, help="CODEOWNERS file"),
):
    """List parsed CODEOWNERS entries with their translated patterns."""
    loaded = _load_entries(repo_root, codeowners)
    for entry in sorted(loaded.values(), key=lambda e: e.line):
        typer.echo(
            json.dumps(
                {
                    "line": entry.line,
                    "owners": entry.owner_handles,
                    "pattern": entry.pattern,
                    "source_pattern": entry.source_pattern,
                },
                sort_keys=True,
                ensure_ascii=True,
            )
        )


@app.command()
def match(
    paths: list[str] = typer.Argument(..., help="Repository-relative file path(s)"),
    repo_root: str = typer.Option(
        DEFAULT_REPO_ROOT,
        envvar="CODEOWNERS_LINT_REPO_ROOT",
        help="Repository root",
    ),
    codeowners: str | None = typer.Option(None, help="CODEOWNERS file"),
):
    """Show which entries match each path; the last matching line owns it."""
    loaded = _load_entries(repo_root, codeowners)
    unowned = False
    for raw in paths:
        path = normalize_relpath(raw)
        hits = matching_entries(loaded, path)
        if not hits:
            unowned = True
            print(f"[yellow]{escape(path)}[/yellow] no matching entry")
            continue
        owner = hits[-1]
        print(
            f"[bold]{escape(path)}[/bold] -> {escape(owner.owners)} "
            f"(line {owner.line}: {escape(owner.source_pattern)})"
        )
        for hit in hits[:-1]:
            print(f"  [dim]overridden: line {hit.line}: {escape(hit.source_pattern)}[/dim]")
    if unowned:
        raise typer.Exit(code=1)


@app.command()
def translate(
    patterns: list[str] = typer.Argument(..., help="CODEOWNERS path pattern(s)"),
):
    """Print the regular expression each pattern translates to."""
    for pattern in patterns:
        typer.echo(f"{pattern}\t{translate_pattern(pattern)}")


def main() -> None:
    app()
