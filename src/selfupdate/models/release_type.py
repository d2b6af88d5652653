"""Release maturity policy."""

import enum


class ReleaseType(enum.Flag):
    """Kinds of releases a caller is willing to update to.

    Flags combine like a bit mask: ``ReleaseType.RELEASE | ReleaseType.PRERELEASE``.
    Drafts have no flag; they are only reachable by pinning an exact tag.
    """

    RELEASE = enum.auto()
    PRERELEASE = enum.auto()

    def is_allowed(self, flag: "ReleaseType") -> bool:
        """Return True if ``flag`` is enabled in this mask."""
        return bool(self & flag)
