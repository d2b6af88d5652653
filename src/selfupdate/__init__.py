"""selfupdate - detect the GitHub release to update a binary to."""

__version__ = "0.1.0"

from selfupdate.core.checksum import ChecksumError, SHA256Validator
from selfupdate.core.detector import (
    Updater,
    default_updater,
    detect_latest,
    detect_latest_of_type,
    detect_version,
    detect_version_of_type,
)
from selfupdate.core.errors import SelfUpdateError, ValidationAssetMissingError
from selfupdate.core.github import GitHubError, InvalidSlugError
from selfupdate.core.semver import NotSemVerError, SemVer
from selfupdate.models import Asset, DetectedRelease, Release, ReleaseType

__all__ = [
    "Asset",
    "ChecksumError",
    "DetectedRelease",
    "GitHubError",
    "InvalidSlugError",
    "NotSemVerError",
    "Release",
    "ReleaseType",
    "SHA256Validator",
    "SelfUpdateError",
    "SemVer",
    "Updater",
    "ValidationAssetMissingError",
    "default_updater",
    "detect_latest",
    "detect_latest_of_type",
    "detect_version",
    "detect_version_of_type",
]
