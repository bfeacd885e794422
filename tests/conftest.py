from __future__ import annotations

import os
import subprocess
from pathlib import Path

import pytest


def _run(cmd: list[str], *, cwd: Path, env: dict[str, str] | None = None) -> str:
    proc = subprocess.run(cmd, cwd=str(cwd), env=env, check=True, capture_output=True, text=True)
    return proc.stdout


class RepoBuilder:
    def __init__(self, root: Path) -> None:
        self.root = root

    def init(self, name: str) -> Path:
        repo = self.root / name
        repo.mkdir(parents=True, exist_ok=True)
        _run(["git", "init", "-q"], cwd=repo)
        _run(["git", "config", "user.name", "Repo User"], cwd=repo)
        _run(["git", "config", "user.email", "repo@example.com"], cwd=repo)
        _run(["git", "config", "commit.gpgsign", "false"], cwd=repo)
        return repo

    def commit(self, repo: Path, *, date: str, author: str, files: dict[str, str | bytes]) -> None:
        for rel, content in files.items():
            path = repo / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
            _run(["git", "add", rel], cwd=repo)
        env = os.environ.copy()
        env["GIT_AUTHOR_NAME"] = author
        env["GIT_AUTHOR_EMAIL"] = f"{author.lower().replace(' ', '.')}@example.com"
        env["GIT_AUTHOR_DATE"] = f"{date}T12:00:00+00:00"
        env["GIT_COMMITTER_DATE"] = f"{date}T12:00:00+00:00"
        _run(["git", "commit", "-q", "--allow-empty", "-m", f"change on {date}"], cwd=repo, env=env)


@pytest.fixture
def repos(tmp_path: Path) -> RepoBuilder:
    return RepoBuilder(tmp_path / "repos")
