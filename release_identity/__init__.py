"""Release identity package.

Derives the version, commit, permalink and tagged-release flag for a build
from the git working copy and the CI environment.
"""

from .classifier import BranchClassifier, ChannelSource, classify_branch
from .metadata import load_metadata, reset_metadata_cache
from .models import CIEnvSignals, GitMetadata, ReleaseIdentity
from .permalink import resolve_permalink, should_publish_permalink

__all__ = [
    "BranchClassifier",
    "ChannelSource",
    "classify_branch",
    "load_metadata",
    "reset_metadata_cache",
    "CIEnvSignals",
    "GitMetadata",
    "ReleaseIdentity",
    "resolve_permalink",
    "should_publish_permalink",
]
