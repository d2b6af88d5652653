"""Release detection.

``Updater`` fetches a repository's releases and picks the one to update to.
Asset names are expected to end in the OS and architecture, such as
``foo_linux_amd64`` or ``foo-darwin-arm64``, optionally followed by an archive
extension (``.zip``, ``.tar.gz``, ``.gzip``, ``.gz``, ``.tar.xz``, ``.xz``).
On Windows ``.exe`` may precede the extension: ``foo_windows_amd64.exe.zip``.
"""

import logging

from selfupdate.core.checksum import Validator
from selfupdate.core.errors import ValidationAssetMissingError
from selfupdate.core.github import GitHubClient, GitHubError, parse_slug
from selfupdate.core.platform import PlatformInfo, get_platform_info
from selfupdate.core.selector import find_release_and_asset, find_validation_asset
from selfupdate.models.detected import DetectedRelease
from selfupdate.models.release_type import ReleaseType

_logger = logging.getLogger(__name__)


class Updater:
    """Detects releases of GitHub repositories for one platform.

    All collaborators are optional: a client is opened per call from the
    global config, the platform is detected, and no validator means no
    validation asset is looked up.
    """

    def __init__(
        self,
        client: GitHubClient | None = None,
        validator: Validator | None = None,
        platform: PlatformInfo | None = None,
        logger: logging.Logger | None = None,
    ):
        self.client = client
        self.validator = validator
        self.platform = platform or get_platform_info()
        self.logger = logger or _logger

    def detect_latest(self, slug: str) -> DetectedRelease | None:
        """Detect the latest stable release of ``slug``. Drafts and pre-releases are ignored."""
        return self.detect_version(slug, "")

    def detect_version(self, slug: str, version: str) -> DetectedRelease | None:
        """Detect the release tagged exactly ``version``, or the latest if empty."""
        return self.detect_version_of_type(slug, version, ReleaseType.RELEASE)

    def detect_latest_of_type(
        self, slug: str, release_types: ReleaseType
    ) -> DetectedRelease | None:
        """Detect the latest release allowed by ``release_types``."""
        return self.detect_version_of_type(slug, "", release_types)

    def detect_version_of_type(
        self, slug: str, version: str, release_types: ReleaseType
    ) -> DetectedRelease | None:
        """Detect a release of ``slug``.

        Returns None when nothing matches, including when the repository or its
        releases do not exist. Raises InvalidSlugError, GitHubError or
        ValidationAssetMissingError.
        """
        owner, repo = parse_slug(slug)

        try:
            releases = self._list_releases(owner, repo)
        except GitHubError as e:
            self.logger.debug("API returned an error response: %s", e)
            if e.not_found:
                self.logger.debug("API returned 404. Repository or release not found")
                return None
            raise

        selection = find_release_and_asset(
            releases, self.platform.suffixes, version, release_types, self.logger
        )
        if selection is None:
            self.logger.debug(
                "Could not find any release for %s and %s", self.platform.os, self.platform.arch
            )
            return None

        rel, asset = selection.release, selection.asset
        self.logger.info(
            "Successfully fetched the latest release. tag: %s, name: %s, URL: %s, Asset: %s",
            rel.tag_name,
            rel.name,
            rel.url,
            asset.download_url,
        )

        validation_asset_id = None
        validation_asset_url = None
        if self.validator is not None:
            validation_name = asset.name + self.validator.suffix
            validation_asset = find_validation_asset(rel, validation_name)
            if validation_asset is None:
                raise ValidationAssetMissingError(validation_name)
            validation_asset_id = validation_asset.id
            validation_asset_url = validation_asset.download_url

        return DetectedRelease(
            version=selection.version,
            asset_url=asset.download_url,
            asset_size=asset.size,
            asset_id=asset.id,
            asset_name=asset.name,
            url=rel.html_url,
            release_notes=rel.body,
            name=rel.name,
            published_at=rel.published_at,
            repo_owner=owner,
            repo_name=repo,
            validation_asset_id=validation_asset_id,
            validation_asset_url=validation_asset_url,
        )

    def _list_releases(self, owner: str, repo: str):
        if self.client is not None:
            return self.client.list_releases(owner, repo)
        with GitHubClient() as client:
            return client.list_releases(owner, repo)


def default_updater() -> Updater:
    """Create an updater using the global config and no validator."""
    return Updater()


def detect_latest(slug: str) -> DetectedRelease | None:
    """Shortcut for ``default_updater().detect_latest(slug)``."""
    return default_updater().detect_latest(slug)


def detect_version(slug: str, version: str) -> DetectedRelease | None:
    """Shortcut for ``default_updater().detect_version(slug, version)``."""
    return default_updater().detect_version(slug, version)


def detect_latest_of_type(slug: str, release_types: ReleaseType) -> DetectedRelease | None:
    """Shortcut for ``default_updater().detect_latest_of_type(slug, release_types)``."""
    return default_updater().detect_latest_of_type(slug, release_types)


def detect_version_of_type(
    slug: str, version: str, release_types: ReleaseType
) -> DetectedRelease | None:
    """Shortcut for ``default_updater().detect_version_of_type(...)``."""
    return default_updater().detect_version_of_type(slug, version, release_types)
