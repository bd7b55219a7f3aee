from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from .models import ChannelName, CIEnvSignals
from .utils.refs import (
    DEV_CHANNEL,
    MAIN_BRANCH,
    is_channel_ref,
    is_release_branch,
    is_tag_ref,
    short_ref_name,
    strip_release_prefix,
)


def _pick_container_ref(refs: Iterable[str]) -> str:
    # Tag build: find the branch the tag was cut from.
    # Sorting puts refs/heads/main ahead of refs/heads/release/v*.
    for ref in sorted(refs):
        if is_tag_ref(ref):
            continue
        if is_channel_ref(ref):
            return ref
    return ""


def normalize_branch_name(raw: str) -> ChannelName:
    """Collapse a raw branch or ref name into main, vN or dev."""
    branch = short_ref_name(raw)
    if branch != MAIN_BRANCH and not is_release_branch(branch):
        return DEV_CHANNEL
    return strip_release_prefix(branch)


def classify_branch(
    refs: Iterable[str],
    pr_head_ref: Optional[str] = None,
    branch_ref: Optional[str] = None,
) -> ChannelName:
    """Return "main", "v*" for release/v* branches, or "dev" for everything else.

    Precedence: pull request head branch, then the branch build ref, then a
    scan of the refs that contain the current commit.
    """
    if pr_head_ref:
        raw = pr_head_ref
    elif branch_ref is not None:
        raw = branch_ref
    else:
        raw = _pick_container_ref(refs)
    return normalize_branch_name(raw)


class ChannelSource(ABC):
    @abstractmethod
    def classify(self, signals: CIEnvSignals) -> ChannelName:
        raise NotImplementedError


class BranchClassifier(ChannelSource):
    def __init__(self, refs: Iterable[str] = ()) -> None:
        self.refs: Tuple[str, ...] = tuple(refs)

    def classify(self, signals: CIEnvSignals) -> ChannelName:
        return classify_branch(self.refs, signals.pr_head_ref, signals.branch_ref)
