from __future__ import annotations

import threading
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from .ci import BuildProvider, detect_build_provider
from .classifier import ChannelSource, classify_branch
from .config import config_with_defaults
from .git import get_commit, get_version, is_exact_tag_match, list_containing_refs
from .models import ChannelName, CIEnvSignals, GitMetadata
from .permalink import resolve_permalink
from .signals import signals_from_env


_metadata: Optional[GitMetadata] = None
_metadata_lock = threading.Lock()


class GitBranchClassifier(ChannelSource):
    """Classifier that only asks git for refs on tag builds."""

    def __init__(self, cwd: Optional[str] = None) -> None:
        self.cwd = cwd

    def classify(self, signals: CIEnvSignals) -> ChannelName:
        refs = list_containing_refs(cwd=self.cwd) if signals.mode == "tag" else []
        return classify_branch(refs, signals.pr_head_ref, signals.branch_ref)


def compute_metadata(
    *,
    cwd: Optional[str] = None,
    config: Dict[str, Any] | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GitMetadata:
    cfg = config_with_defaults(config)
    signals = signals_from_env(environ)

    # Pull requests resolve to "dev" without looking at tags
    tagged = False
    if not signals.is_pull_request:
        tagged = is_exact_tag_match(cwd=cwd, match=cfg["tag_match"])

    identity = resolve_permalink(signals, tagged, GitBranchClassifier(cwd))

    return GitMetadata(
        permalink=identity.permalink,
        version=get_version(cwd=cwd, fallback=cfg["fallback_version"]),
        commit=get_commit(cwd=cwd, fallback=cfg["fallback_commit"]),
        is_tagged_release=identity.is_tagged_release,
    )


def export_metadata(
    metadata: GitMetadata,
    provider: BuildProvider,
    config: Dict[str, Any] | None = None,
) -> None:
    cfg = config_with_defaults(config)
    provider.set_env(cfg["permalink_env_var"], metadata.permalink)
    provider.set_env(cfg["version_env_var"], metadata.version)


def load_metadata(
    *,
    cwd: Optional[str] = None,
    config: Dict[str, Any] | None = None,
    environ: Optional[Mapping[str, str]] = None,
    export: bool = True,
) -> GitMetadata:
    """Return the release metadata of the working copy, computed once per process.

    The first call decides `cwd`, `config` and `environ`; later calls reuse its
    result. With `export`, PERMALINK and VERSION are handed to the detected
    CI build provider on every call.
    """
    global _metadata

    with _metadata_lock:
        if _metadata is None:
            md = compute_metadata(cwd=cwd, config=config, environ=environ)
            logger.info(f"Tagged Release: {md.is_tagged_release}")
            logger.info(f"Permalink: {md.permalink}")
            logger.info(f"Version: {md.version}")
            logger.info(f"Commit: {md.commit}")
            _metadata = md
        metadata = _metadata

    if export:
        provider = detect_build_provider(environ)
        logger.debug(f"Exporting release metadata via {provider.name} provider")
        export_metadata(metadata, provider, config)

    return metadata


def reset_metadata_cache() -> None:
    global _metadata
    with _metadata_lock:
        _metadata = None
