"""
Tests for branch classification (main, v*, dev).
"""
import pytest

from release_identity.classifier import BranchClassifier, classify_branch, normalize_branch_name
from release_identity.models import CIEnvSignals


class TestTagBuildRefScan:
    """Channel derived from the refs that contain the commit."""

    def test_local_main_branch(self):
        assert classify_branch(["refs/heads/main"]) == "main"

    def test_remote_release_branch(self):
        assert classify_branch(["refs/remotes/origin/release/v2"]) == "v2"

    def test_empty_refs_is_dev(self):
        assert classify_branch([]) == "dev"

    def test_only_tag_refs_is_dev(self):
        refs = ["refs/tags/v1.0.0", "refs/tags/v1.0.1"]
        assert classify_branch(refs) == "dev"

    def test_tag_named_like_release_branch_is_ignored(self):
        assert classify_branch(["refs/tags/release/v3"]) == "dev"

    def test_tags_namespace_marker_is_ignored(self):
        assert classify_branch(["refs/tags", "refs/heads/main"]) == "main"

    @pytest.mark.parametrize("refs", [
        ["refs/heads/feature-x"],
        ["refs/heads/mainline", "refs/remotes/origin/feature/main-fix"],
        ["refs/heads/releases/v1", "refs/heads/release-v2"],
        ["refs/tags/v2.0.0", "refs/remotes/origin/HEAD"],
    ])
    def test_non_channel_refs_are_dev(self, refs):
        assert classify_branch(refs) == "dev"

    def test_main_sorts_ahead_of_release_branch(self):
        refs = [
            "refs/remotes/origin/release/v1",
            "refs/tags/v1.4.0",
            "refs/heads/main",
        ]
        assert classify_branch(refs) == "main"

    def test_first_release_branch_after_sort_wins(self):
        refs = ["refs/remotes/origin/release/v2", "refs/heads/release/v1"]
        # refs/heads/... sorts before refs/remotes/...
        assert classify_branch(refs) == "v1"

    def test_input_order_does_not_matter(self):
        refs = ["refs/heads/release/v3", "refs/heads/main", "refs/tags/v3.0.0"]
        assert classify_branch(refs) == classify_branch(list(reversed(refs)))


class TestSignalPrecedence:
    """Pull request head branch beats branch build ref beats ref scan."""

    @pytest.mark.parametrize("refs", [
        [],
        ["refs/heads/main"],
        ["refs/remotes/origin/release/v2"],
    ])
    def test_pull_request_feature_branch_is_dev(self, refs):
        assert classify_branch(refs, pr_head_ref="feature-x") == "dev"

    def test_pull_request_from_release_branch(self):
        assert classify_branch(["refs/heads/main"], pr_head_ref="release/v4") == "v4"

    def test_empty_pull_request_signal_is_ignored(self):
        assert classify_branch(["refs/heads/main"], pr_head_ref="") == "main"

    def test_branch_build_uses_branch_name(self):
        assert classify_branch(["refs/heads/main"], branch_ref="release/v1") == "v1"

    def test_branch_build_on_feature_branch_skips_ref_scan(self):
        assert classify_branch(["refs/heads/main"], branch_ref="feature-y") == "dev"

    def test_empty_branch_build_ref_is_dev(self):
        assert classify_branch(["refs/heads/main"], branch_ref="") == "dev"

    def test_pull_request_beats_branch_build(self):
        assert classify_branch([], pr_head_ref="main", branch_ref="release/v1") == "main"


class TestNormalizeBranchName:
    @pytest.mark.parametrize("raw,expected", [
        ("main", "main"),
        ("refs/heads/main", "main"),
        ("refs/remotes/origin/main", "main"),
        ("release/v10", "v10"),
        ("refs/heads/release/v1", "v1"),
        ("master", "dev"),
        ("", "dev"),
        ("release/1.0", "dev"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_branch_name(raw) == expected


class TestBranchClassifier:
    def test_classify_reads_signals(self):
        classifier = BranchClassifier(["refs/heads/main"])
        assert classifier.classify(CIEnvSignals()) == "main"
        assert classifier.classify(CIEnvSignals(branch_ref="release/v7")) == "v7"
        assert classifier.classify(CIEnvSignals(pr_head_ref="fix-typo")) == "dev"

    def test_refs_are_snapshotted(self):
        refs = ["refs/heads/main"]
        classifier = BranchClassifier(refs)
        refs.append("refs/heads/release/v1")
        assert classifier.refs == ("refs/heads/main",)

    def test_repeated_classification_is_stable(self):
        classifier = BranchClassifier(["refs/remotes/origin/release/v2", "refs/tags/v2.1.0"])
        signals = CIEnvSignals()
        assert classifier.classify(signals) == classifier.classify(signals) == "v2"
