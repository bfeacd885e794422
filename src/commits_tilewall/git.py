from __future__ import annotations

import subprocess
from pathlib import Path


class HistorySourceError(RuntimeError):
    pass


def run_git(args: list[str], cwd: Path) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        encoding="utf-8",
        errors="replace",
    )
    return proc.returncode, proc.stdout, proc.stderr


def is_unborn_repo(repo: Path) -> bool:
    """True for a work tree whose HEAD does not resolve yet (no commits)."""
    code, out, _ = run_git(["rev-parse", "--is-inside-work-tree"], cwd=repo)
    if code != 0 or out.strip() != "true":
        return False
    code, _, _ = run_git(["rev-parse", "--verify", "-q", "HEAD"], cwd=repo)
    return code != 0


def _git_log(repo: Path, args: list[str]) -> str:
    try:
        code, out, err = run_git(["log", *args], cwd=repo)
        if code != 0 and is_unborn_repo(repo):
            return ""
    except OSError as e:
        raise HistorySourceError(f"failed to run git log in {repo}: {e}") from e
    if code != 0:
        raise HistorySourceError(f"git log exited {code} in {repo}: {err.strip()[:500]}")
    return out


def read_commit_dates(repo: Path, author: str) -> str:
    """One committer date (YYYY-MM-DD) per commit by `author`."""
    return _git_log(repo, ["--author", author, "--pretty=format:%cd", "--date=short"])


def read_numstat_log(repo: Path, author: str) -> str:
    """Committer dates for `author`'s commits, each followed by that commit's numstat lines."""
    return _git_log(repo, ["--author", author, "--pretty=format:%cd", "--date=short", "--numstat"])


def read_repo_logs(repo: Path, author: str) -> tuple[str, str]:
    return read_commit_dates(repo, author), read_numstat_log(repo, author)
