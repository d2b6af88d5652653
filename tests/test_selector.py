"""Tests for release filtering and selection."""

import logging

from selfupdate.core.platform import generate_suffixes
from selfupdate.core.selector import (
    find_asset_from_release,
    find_release_and_asset,
    find_validation_asset,
)
from selfupdate.core.semver import SemVer
from selfupdate.models.release_type import ReleaseType

from conftest import make_release

LINUX = generate_suffixes("linux", "amd64")
DARWIN_ARM = generate_suffixes("darwin", "arm64")
ALL_TYPES = ReleaseType.RELEASE | ReleaseType.PRERELEASE


class TestReleaseType:
    def test_membership(self):
        assert ReleaseType.RELEASE.is_allowed(ReleaseType.RELEASE)
        assert not ReleaseType.RELEASE.is_allowed(ReleaseType.PRERELEASE)
        assert ALL_TYPES.is_allowed(ReleaseType.PRERELEASE)
        assert ALL_TYPES.is_allowed(ReleaseType.RELEASE)


class TestFindAssetFromRelease:
    def test_matching_release(self):
        rel = make_release("v1.0.0", ["tool_linux_amd64.tar.gz"])
        asset, version = find_asset_from_release(rel, LINUX)
        assert asset.name == "tool_linux_amd64.tar.gz"
        assert version == SemVer(1, 0, 0)

    def test_non_semver_tag_excluded(self):
        for tag in ("latest", "nightly-2024", "v1.0", "release-1.0.0"):
            rel = make_release(tag, ["tool_linux_amd64.tar.gz"])
            assert find_asset_from_release(rel, LINUX, release_types=ALL_TYPES) is None

    def test_non_semver_tag_excluded_even_when_pinned(self):
        rel = make_release("latest", ["tool_linux_amd64.tar.gz"])
        assert find_asset_from_release(rel, LINUX, target_version="latest") is None

    def test_draft_excluded_under_any_policy(self):
        rel = make_release("v1.0.0", ["tool_linux_amd64"], draft=True)
        assert find_asset_from_release(rel, LINUX, release_types=ALL_TYPES) is None
        rel = make_release("v1.0.0-rc.1", ["tool_linux_amd64"], draft=True, prerelease=True)
        assert find_asset_from_release(rel, LINUX, release_types=ALL_TYPES) is None

    def test_prerelease_requires_policy(self):
        rel = make_release("v2.0.0-beta", ["tool_linux_amd64.zip"], prerelease=True)
        assert find_asset_from_release(rel, LINUX, release_types=ReleaseType.RELEASE) is None
        assert find_asset_from_release(rel, LINUX, release_types=ALL_TYPES) is not None
        assert find_asset_from_release(rel, LINUX, release_types=ReleaseType.PRERELEASE) is not None

    def test_release_excluded_when_policy_only_prerelease(self):
        rel = make_release("v1.0.0", ["tool_linux_amd64.zip"])
        assert find_asset_from_release(rel, LINUX, release_types=ReleaseType.PRERELEASE) is None

    def test_target_version_must_equal_tag(self):
        rel = make_release("v1.0.0", ["tool_linux_amd64.zip"])
        assert find_asset_from_release(rel, LINUX, target_version="1.0.0") is None
        assert find_asset_from_release(rel, LINUX, target_version="v1.0.0") is not None

    def test_target_version_bypasses_draft_and_prerelease_gate(self):
        draft = make_release("v1.1.0", ["tool_linux_amd64.zip"], draft=True)
        pre = make_release("v2.0.0-rc.1", ["tool_linux_amd64.zip"], prerelease=True)
        assert find_asset_from_release(draft, LINUX, "v1.1.0", ReleaseType.RELEASE) is not None
        assert find_asset_from_release(pre, LINUX, "v2.0.0-rc.1", ReleaseType.RELEASE) is not None
        assert find_asset_from_release(draft, LINUX, "v1.1.0", ReleaseType.PRERELEASE) is not None

    def test_first_matching_asset_wins(self):
        rel = make_release(
            "v1.0.0",
            ["checksums.txt", "tool_linux_amd64.deb", "tool-linux-amd64", "tool_linux_amd64.tar.gz"],
        )
        asset, _ = find_asset_from_release(rel, LINUX)
        assert asset.name == "tool-linux-amd64"
        rel = make_release("v1.0.0", ["tool_linux_amd64.tar.gz", "tool-linux-amd64"])
        asset, _ = find_asset_from_release(rel, LINUX)
        assert asset.name == "tool_linux_amd64.tar.gz"

    def test_no_platform_asset(self):
        rel = make_release("v1.0.0", ["tool_darwin_amd64.zip", "tool", "tool_linux_amd64.deb"])
        assert find_asset_from_release(rel, LINUX) is None

    def test_windows_exe_asset(self):
        rel = make_release("v1.0.0", ["tool_windows_amd64.exe.zip"])
        asset, _ = find_asset_from_release(rel, generate_suffixes("windows", "amd64"))
        assert asset.name == "tool_windows_amd64.exe.zip"
        assert find_asset_from_release(rel, LINUX) is None

    def test_skips_are_reported_to_injected_logger(self, caplog):
        log = logging.getLogger("test.selector")
        rel = make_release("v1.0.0", [], draft=True)
        with caplog.at_level(logging.DEBUG, logger="test.selector"):
            find_asset_from_release(rel, LINUX, logger=log)
        assert [r.name for r in caplog.records] == ["test.selector"]
        assert "draft" in caplog.records[0].getMessage()


class TestFindReleaseAndAsset:
    def test_picks_newest(self):
        releases = [
            make_release("v1.2.0", ["tool_linux_amd64.tar.gz"]),
            make_release("v1.1.0", ["tool_linux_amd64.tar.gz"]),
        ]
        selection = find_release_and_asset(releases, LINUX, release_types=ReleaseType.RELEASE)
        assert selection.version == SemVer(1, 2, 0)
        assert selection.release is releases[0]
        assert selection.asset is releases[0].assets[0]

    def test_does_not_trust_input_order(self):
        releases = [
            make_release("v0.9.0", ["tool_linux_amd64"]),
            make_release("v1.10.0", ["tool_linux_amd64"]),
            make_release("v1.9.0", ["tool_linux_amd64"]),
        ]
        for ordering in (releases, list(reversed(releases))):
            selection = find_release_and_asset(ordering, LINUX)
            assert str(selection.version) == "1.10.0"

    def test_equal_version_later_wins(self):
        first = make_release("v1.0.0", ["tool_linux_amd64.zip"])
        second = make_release("1.0.0", ["tool_linux_amd64.tar.gz"])
        selection = find_release_and_asset([first, second], LINUX)
        assert selection.release is second
        selection = find_release_and_asset([second, first], LINUX)
        assert selection.release is first

    def test_equal_precedence_with_build_metadata_later_wins(self):
        first = make_release("v1.0.0+a", ["tool_linux_amd64.zip"])
        second = make_release("v1.0.0+b", ["tool_linux_amd64.zip"])
        selection = find_release_and_asset([first, second], LINUX)
        assert selection.release is second

    def test_release_beats_its_prerelease(self):
        releases = [
            make_release("v1.0.0", ["tool_linux_amd64"]),
            make_release("v1.0.0-rc.2", ["tool_linux_amd64"], prerelease=True),
        ]
        selection = find_release_and_asset(releases, LINUX, release_types=ALL_TYPES)
        assert str(selection.version) == "1.0.0"

    def test_newer_prerelease_selected_when_allowed(self):
        releases = [
            make_release("v1.0.0", ["tool_linux_amd64"]),
            make_release("v1.1.0-beta", ["tool_linux_amd64"], prerelease=True),
        ]
        assert str(find_release_and_asset(releases, LINUX).version) == "1.0.0"
        selection = find_release_and_asset(releases, LINUX, release_types=ALL_TYPES)
        assert str(selection.version) == "1.1.0-beta"

    def test_skips_broken_releases(self):
        releases = [
            make_release("v3.0.0", ["tool_linux_amd64"], draft=True),
            make_release("nightly", ["tool_linux_amd64"]),
            make_release("v2.0.0", ["tool_darwin_amd64"]),
            make_release("v1.5.0", ["tool_linux_amd64"]),
        ]
        assert str(find_release_and_asset(releases, LINUX).version) == "1.5.0"

    def test_pinned_version(self):
        releases = [
            make_release("v1.2.0", ["tool_linux_amd64"]),
            make_release("v1.1.0", ["tool_linux_amd64"], draft=True),
        ]
        selection = find_release_and_asset(releases, LINUX, target_version="v1.1.0")
        assert selection.release is releases[1]

    def test_prerelease_darwin_example(self):
        releases = [make_release("v2.0.0-beta", ["tool_darwin_arm64.zip"], prerelease=True)]
        assert find_release_and_asset(releases, DARWIN_ARM, release_types=ReleaseType.RELEASE) is None
        selection = find_release_and_asset(releases, DARWIN_ARM, release_types=ALL_TYPES)
        assert selection.version == SemVer.parse("2.0.0-beta")

    def test_none_found(self):
        assert find_release_and_asset([], LINUX) is None
        assert find_release_and_asset([make_release("v1.0.0", ["tool.zip"])], LINUX) is None


class TestFindValidationAsset:
    def test_exact_match_only(self):
        rel = make_release(
            "v1.0.0",
            ["tool_linux_amd64.tar.gz", "other_tool_linux_amd64.tar.gz.sha256", "tool_linux_amd64.tar.gz.sha256"],
        )
        asset = find_validation_asset(rel, "tool_linux_amd64.tar.gz.sha256")
        assert asset is rel.assets[2]

    def test_missing(self):
        rel = make_release("v1.0.0", ["tool_linux_amd64.tar.gz"])
        assert find_validation_asset(rel, "tool_linux_amd64.tar.gz.sha256") is None
