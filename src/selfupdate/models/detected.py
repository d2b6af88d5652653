"""Detected release data model."""

from dataclasses import dataclass
from datetime import datetime

from selfupdate.core.semver import SemVer


@dataclass(frozen=True)
class DetectedRelease:
    """The release and asset chosen for the current platform."""

    version: SemVer
    asset_url: str
    asset_size: int
    asset_id: int
    asset_name: str
    url: str  # release HTML page
    release_notes: str
    name: str
    published_at: datetime | None
    repo_owner: str
    repo_name: str
    validation_asset_id: int | None = None
    validation_asset_url: str | None = None

    @property
    def slug(self) -> str:
        """Repository in owner/name form."""
        return f"{self.repo_owner}/{self.repo_name}"

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for display or serialization."""
        return {
            "version": str(self.version),
            "asset_url": self.asset_url,
            "asset_size": self.asset_size,
            "asset_id": self.asset_id,
            "asset_name": self.asset_name,
            "validation_asset_id": self.validation_asset_id,
            "validation_asset_url": self.validation_asset_url,
            "url": self.url,
            "release_notes": self.release_notes,
            "name": self.name,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "repo": self.slug,
        }
