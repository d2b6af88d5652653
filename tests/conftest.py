"""Shared fixtures for the selfupdate test suite."""

import itertools

import pytest

from selfupdate.core.config import SelfUpdateConfig, set_config
from selfupdate.models.release import Asset, Release

_ids = itertools.count(1)


def make_asset(name: str, size: int = 1024) -> Asset:
    asset_id = next(_ids)
    return Asset(
        name=name,
        size=size,
        id=asset_id,
        download_url=f"https://github.com/owner/tool/releases/download/{asset_id}/{name}",
    )


def make_release(
    tag: str,
    assets: list[str] | tuple[str, ...] = (),
    draft: bool = False,
    prerelease: bool = False,
    body: str = "",
) -> Release:
    return Release(
        tag_name=tag,
        name=f"Release {tag}",
        body=body,
        draft=draft,
        prerelease=prerelease,
        assets=tuple(make_asset(name) for name in assets),
        html_url=f"https://github.com/owner/tool/releases/tag/{tag}",
        url=f"https://api.github.com/repos/owner/tool/releases/{tag}",
    )


def release_payload(
    tag: str,
    assets: list[str] = (),
    draft: bool = False,
    prerelease: bool = False,
) -> dict:
    """A release as the GitHub API returns it."""
    return {
        "tag_name": tag,
        "name": tag,
        "body": f"Notes for {tag}",
        "draft": draft,
        "prerelease": prerelease,
        "published_at": "2024-03-01T10:00:00Z",
        "html_url": f"https://github.com/owner/tool/releases/tag/{tag}",
        "url": f"https://api.github.com/repos/owner/tool/releases/{tag}",
        "assets": [
            {
                "id": 100 + i,
                "name": name,
                "size": 2048,
                "browser_download_url": f"https://github.com/owner/tool/releases/download/{tag}/{name}",
            }
            for i, name in enumerate(assets)
        ],
    }


@pytest.fixture(autouse=True)
def isolated_config():
    """Keep tests away from the real environment's GitHub settings."""
    set_config(SelfUpdateConfig())
    yield
    set_config(None)
