from __future__ import annotations

import os
from typing import Mapping, Optional

from .models import CIEnvSignals
from .utils.refs import TAGS_PREFIX

PR_HEAD_REF_VAR = "GITHUB_HEAD_REF"
REF_VAR = "GITHUB_REF"
REF_NAME_VAR = "GITHUB_REF_NAME"


def signals_from_env(environ: Optional[Mapping[str, str]] = None) -> CIEnvSignals:
    # GitHub Actions:
    # pull_request: GITHUB_HEAD_REF=feature-x
    # push to branch: GITHUB_REF=refs/heads/main, GITHUB_REF_NAME=main
    # push to tag: GITHUB_REF=refs/tags/v1.0.0, GITHUB_REF_NAME=v1.0.0
    env = os.environ if environ is None else environ

    head_ref = env.get(PR_HEAD_REF_VAR)
    if head_ref:
        return CIEnvSignals(pr_head_ref=head_ref)

    ref = env.get(REF_VAR)
    if ref is not None and not ref.startswith(TAGS_PREFIX):
        # GITHUB_REF_NAME carries the short name for both tags and branches
        return CIEnvSignals(branch_ref=env.get(REF_NAME_VAR, ""))

    return CIEnvSignals()
