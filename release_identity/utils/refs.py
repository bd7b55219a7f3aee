from __future__ import annotations

from typing import Literal

RefKind = Literal["branch", "remote", "tag", "unknown"]

HEADS_PREFIX = "refs/heads/"
REMOTE_PREFIX = "refs/remotes/origin/"
TAGS_PREFIX = "refs/tags/"
RELEASE_PREFIX = "release/"

MAIN_BRANCH = "main"
DEV_CHANNEL = "dev"


def classify_ref_kind(ref: str) -> RefKind:
    if ref.startswith(HEADS_PREFIX):
        return "branch"
    if ref.startswith(REMOTE_PREFIX):
        return "remote"
    if ref.startswith(TAGS_PREFIX):
        return "tag"
    return "unknown"


def is_tag_ref(ref: str) -> bool:
    # refs/tags/* and bare ".../tags" namespace markers
    return classify_ref_kind(ref) == "tag" or ref.endswith("/tags")


def is_channel_ref(ref: str) -> bool:
    """True for refs that name main or a release/v* branch."""
    return ref.endswith("/" + MAIN_BRANCH) or ("/" + RELEASE_PREFIX + "v") in ref


def short_ref_name(ref: str) -> str:
    # refs/heads/main -> main, refs/remotes/origin/release/v1 -> release/v1
    for prefix in (HEADS_PREFIX, REMOTE_PREFIX):
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return ref


def is_release_branch(name: str) -> bool:
    return name.startswith(RELEASE_PREFIX + "v")


def strip_release_prefix(name: str) -> str:
    if name.startswith(RELEASE_PREFIX):
        return name[len(RELEASE_PREFIX):]
    return name
