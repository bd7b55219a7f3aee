from __future__ import annotations

from .classifier import ChannelSource
from .models import PUBLISHED_PERMALINKS, CIEnvSignals, ReleaseIdentity
from .utils.refs import DEV_CHANNEL, MAIN_BRANCH, strip_release_prefix


def resolve_permalink(
    signals: CIEnvSignals,
    tag_exact_match: bool,
    channel_source: ChannelSource,
) -> ReleaseIdentity:
    # Pull requests always publish to dev, even when the head is tagged
    if signals.is_pull_request:
        return ReleaseIdentity(permalink=DEV_CHANNEL, is_tagged_release=False)

    if tag_exact_match:
        prefix, tagged = "latest", True
    else:
        prefix, tagged = "canary", False

    # Current branch, or the branch the tag was cut from
    channel = channel_source.classify(signals)

    # "canary", "latest", "latest-v1", "canary-dev", ...
    if channel == MAIN_BRANCH:
        return ReleaseIdentity(permalink=prefix, is_tagged_release=tagged)
    return ReleaseIdentity(
        permalink=f"{prefix}-{strip_release_prefix(channel)}",
        is_tagged_release=tagged,
    )


def should_publish_permalink(permalink: str) -> bool:
    return permalink in PUBLISHED_PERMALINKS
