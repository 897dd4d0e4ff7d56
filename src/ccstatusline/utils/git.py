"""Git command execution utilities."""

import re
import subprocess

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..types import GitStatus

GIT_TIMEOUT = 5  # seconds


def _run_git(args: list[str], cwd: Optional[str] = None) -> Optional[str]:
    """Run git command and return stdout, or None on error.

    Args:
        args: Git command arguments
        cwd: Working directory for git command

    Returns:
        Command stdout or None if command failed
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
            cwd=cwd,
        )
        return result.stdout.strip() if result.returncode == 0 else None
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return None


def get_git_status(cwd: Optional[str] = None) -> GitStatus:
    """Get git branch and uncommitted change counts.

    Args:
        cwd: Working directory to check git status in

    Returns:
        GitStatus with branch and change info
    """
    if _run_git(["rev-parse", "--git-dir"], cwd=cwd) is None:
        return GitStatus(is_git_repo=False)

    # Run remaining commands in parallel for faster execution
    with ThreadPoolExecutor(max_workers=3) as executor:
        branch_future = executor.submit(_run_git, ["branch", "--show-current"], cwd)
        unstaged_future = executor.submit(_run_git, ["diff", "--shortstat"], cwd)
        staged_future = executor.submit(
            _run_git, ["diff", "--cached", "--shortstat"], cwd
        )

        branch = branch_future.result()
        unstaged = unstaged_future.result()
        staged = staged_future.result()

    insertions = 0
    deletions = 0

    for stat_output in (unstaged, staged):
        if stat_output:
            insertions += _parse_insertions(stat_output)
            deletions += _parse_deletions(stat_output)

    return GitStatus(
        branch=branch or None,
        insertions=insertions,
        deletions=deletions,
        is_git_repo=True,
    )


def _parse_insertions(stat_output: str) -> int:
    """Parse insertions from git diff --shortstat output."""
    match = re.search(r"(\d+) insertion", stat_output)
    return int(match.group(1)) if match else 0


def _parse_deletions(stat_output: str) -> int:
    """Parse deletions from git diff --shortstat output."""
    match = re.search(r"(\d+) deletion", stat_output)
    return int(match.group(1)) if match else 0
