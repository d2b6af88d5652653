"""Release and asset selection.

Picks the newest release whose tag is a semantic version, which passes the
maturity policy and which ships an asset built for the requested platform.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from selfupdate.core.semver import NotSemVerError, SemVer, parse_version
from selfupdate.models.release import Asset, Release
from selfupdate.models.release_type import ReleaseType

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """A release together with its matching asset and parsed version."""

    release: Release
    asset: Asset
    version: SemVer


def find_asset_from_release(
    release: Release,
    suffixes: Sequence[str],
    target_version: str = "",
    release_types: ReleaseType = ReleaseType.RELEASE,
    logger: logging.Logger | None = None,
) -> tuple[Asset, SemVer] | None:
    """Return the platform asset and version of ``release``, or None if ineligible.

    A non-empty ``target_version`` must equal the tag exactly and bypasses the
    draft and maturity checks. Otherwise drafts are never eligible and
    ``release_types`` decides between releases and pre-releases.
    """
    logger = logger or _logger
    tag = release.tag_name

    if target_version and target_version != tag:
        logger.debug("Skip %s not matching to specified version %s", tag, target_version)
        return None

    if not target_version:
        if release.draft:
            logger.debug("Skip draft version %s", tag)
            return None
        if release.prerelease and not release_types.is_allowed(ReleaseType.PRERELEASE):
            logger.debug("Skip pre-release version %s", tag)
            return None
        if not release.prerelease and not release_types.is_allowed(ReleaseType.RELEASE):
            logger.debug("Skip release version %s", tag)
            return None

    try:
        version = parse_version(tag)
    except NotSemVerError:
        logger.debug("Failed to parse a semantic version from tag %s", tag)
        return None

    for asset in release.assets:
        if asset.name.endswith(tuple(suffixes)):
            return asset, version

    logger.debug("No suitable asset was found in release %s", tag)
    return None


def find_release_and_asset(
    releases: Iterable[Release],
    suffixes: Sequence[str],
    target_version: str = "",
    release_types: ReleaseType = ReleaseType.RELEASE,
    logger: logging.Logger | None = None,
) -> Selection | None:
    """Find the highest versioned eligible release.

    The input order is not trusted; every release is considered. On equal
    versions the one seen later wins.
    """
    logger = logger or _logger
    best: Selection | None = None

    for release in releases:
        found = find_asset_from_release(release, suffixes, target_version, release_types, logger)
        if found is None:
            continue
        asset, version = found
        # 0.0.1-beta < 0.0.1, so pre-releases lose to their own release
        if best is None or version >= best.version:
            best = Selection(release=release, asset=asset, version=version)

    return best


def find_validation_asset(release: Release, validation_name: str) -> Asset | None:
    """Find the asset named exactly ``validation_name``."""
    for asset in release.assets:
        if asset.name == validation_name:
            return asset
    return None
