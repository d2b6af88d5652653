"""GitHub release data models."""

from dataclasses import dataclass, field
from datetime import datetime


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub API timestamp such as ``2024-01-31T12:00:00Z``."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class Asset:
    """Represents a GitHub release asset."""

    name: str
    size: int
    id: int
    download_url: str

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(
            name=data["name"],
            size=data.get("size", 0),
            id=data.get("id", 0),
            download_url=data.get("browser_download_url", ""),
        )


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    tag_name: str
    name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    published_at: datetime | None = None
    assets: tuple[Asset, ...] = field(default_factory=tuple)
    html_url: str = ""
    url: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = tuple(Asset.from_api_response(a) for a in data.get("assets") or [])
        return cls(
            tag_name=data["tag_name"],
            name=data.get("name") or data["tag_name"],
            body=data.get("body") or "",
            draft=data.get("draft", False),
            prerelease=data.get("prerelease", False),
            published_at=parse_timestamp(data.get("published_at")),
            assets=assets,
            html_url=data.get("html_url", ""),
            url=data.get("url", ""),
        )
