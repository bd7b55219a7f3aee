from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional


BuildMode = Literal["pull_request", "branch", "tag"]
ChannelName = str  # "main", "v<N>" or "dev"

PUBLISHED_PERMALINKS = {"canary", "latest"}


@dataclass(frozen=True)
class CIEnvSignals:
    pr_head_ref: Optional[str] = None   # e.g. "feature-x" (GITHUB_HEAD_REF)
    branch_ref: Optional[str] = None    # e.g. "main" (GITHUB_REF_NAME on branch builds)

    @property
    def is_pull_request(self) -> bool:
        return bool(self.pr_head_ref)

    @property
    def mode(self) -> BuildMode:
        if self.is_pull_request:
            return "pull_request"
        if self.branch_ref is not None:
            return "branch"
        return "tag"


@dataclass(frozen=True)
class ReleaseIdentity:
    permalink: str
    is_tagged_release: bool


@dataclass(frozen=True)
class GitMetadata:
    # Version alias, e.g. latest or canary
    permalink: str

    # Tag, or tag plus commit distance and hash, e.g. v0.30.1-32-gfe72ff73
    version: str

    # Short hash of the current commit
    commit: str

    is_tagged_release: bool

    def should_publish_permalink(self) -> bool:
        # canary-v1 / latest-v1 are not published for now
        return self.permalink in PUBLISHED_PERMALINKS

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "permalink": self.permalink,
            "version": self.version,
            "commit": self.commit,
            "is_tagged_release": self.is_tagged_release,
            "should_publish_permalink": self.should_publish_permalink(),
        }
        return out
