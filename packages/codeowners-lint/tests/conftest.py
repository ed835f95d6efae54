from __future__ import annotations

from pathlib import Path

import pytest

REVIEWERS = "@dotnet/dotnet-docker-reviewers"


def write_repo(root: Path, files: dict[str, str]) -> Path:
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def clean_repo(tmp_path: Path) -> Path:
    return write_repo(
        tmp_path / "clean",
        {
            ".github/CODEOWNERS": (
                "# Owners\n"
                "* @org/everyone\n"
                f"/src/ @org/app {REVIEWERS}\n"
                f"eng/ @org/images {REVIEWERS}\n"
                f"/src/Dockerfile @org/images {REVIEWERS}"
            ),
            "README.md": "# readme\n",
            "src/app.py": "print('hi')\n",
            "src/Dockerfile": "FROM scratch\n",
            "eng/Dockerfile": "FROM scratch\n",
        },
    )


@pytest.fixture
def broken_repo(tmp_path: Path) -> Path:
    return write_repo(
        tmp_path / "broken",
        {
            "CODEOWNERS": (
                "/src/ @org/app\n"
                f"docs/ @org/docs {REVIEWERS}\n"
                f"tools/*.sh alice {REVIEWERS}\n"
            ),
            "src/app.py": "print('hi')\n",
            "eng/Dockerfile": "FROM scratch\n",
            "tools/run.sh": "#!/bin/sh\n",
        },
    )
