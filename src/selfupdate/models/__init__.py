"""Data models for selfupdate."""

from selfupdate.models.release import Release, Asset
from selfupdate.models.release_type import ReleaseType
from selfupdate.models.detected import DetectedRelease

__all__ = ["Release", "Asset", "ReleaseType", "DetectedRelease"]
