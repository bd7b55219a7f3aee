"""Thin wrappers over the git binary.

Every query degrades to a fallback value when git fails (no tags, shallow
clone, not a repository, git not installed).
"""

from __future__ import annotations

import subprocess
from typing import List, Optional, Sequence

from loguru import logger

from .errors import GitCommandError

DEFAULT_VERSION = "v0.0.0"
DEFAULT_COMMIT = "0000000"
DEFAULT_TAG_MATCH = "v*"


def run_git(args: Sequence[str], *, cwd: Optional[str] = None) -> str:
    """Run git and return stripped stdout, raising GitCommandError on failure."""
    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            check=True,
            text=True,
            capture_output=True,
            cwd=cwd,
        )
    except FileNotFoundError as exc:
        raise GitCommandError("git executable not found") from exc
    except subprocess.CalledProcessError as exc:
        details = (exc.stderr or exc.stdout or str(exc)).strip()
        raise GitCommandError(f"Command failed: {' '.join(command)}\n{details}") from exc
    return result.stdout.strip()


def get_version(*, cwd: Optional[str] = None, fallback: str = DEFAULT_VERSION) -> str:
    # e.g. v0.30.1 (tagged) or v0.30.1-32-gfe72ff73 (commits after the tag)
    try:
        version = run_git(["describe", "--tags"], cwd=cwd)
    except GitCommandError as exc:
        logger.debug(f"git describe failed, using {fallback}: {exc}")
        return fallback
    # repo without any tags in it
    return version or fallback


def get_commit(*, cwd: Optional[str] = None, fallback: str = DEFAULT_COMMIT) -> str:
    try:
        commit = run_git(["rev-parse", "--short", "HEAD"], cwd=cwd)
    except GitCommandError as exc:
        logger.debug(f"git rev-parse failed, using {fallback}: {exc}")
        return fallback
    return commit or fallback


def list_containing_refs(*, cwd: Optional[str] = None) -> List[str]:
    """Full names of every ref that contains HEAD."""
    try:
        output = run_git(["for-each-ref", "--contains", "HEAD", "--format=%(refname)"], cwd=cwd)
    except GitCommandError as exc:
        logger.debug(f"git for-each-ref failed: {exc}")
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def is_exact_tag_match(*, cwd: Optional[str] = None, match: str = DEFAULT_TAG_MATCH) -> bool:
    """True when HEAD is exactly a tag matching `match`."""
    try:
        run_git(["describe", "--tags", f"--match={match}", "--exact-match"], cwd=cwd)
    except GitCommandError:
        return False
    return True
