"""Platform detection and asset suffix generation."""

import platform
from dataclasses import dataclass

SEPARATORS = ("_", "-")
EXTENSIONS = (".zip", ".tar.gz", ".gzip", ".gz", ".tar.xz", ".xz", "")


@dataclass(frozen=True)
class PlatformInfo:
    """Current platform information."""

    os: str  # darwin, linux, windows
    arch: str  # amd64, arm64, 386, arm

    @classmethod
    def detect(cls) -> "PlatformInfo":
        """Detect current platform."""
        system = platform.system().lower()
        machine = platform.machine().lower()

        # Normalize OS
        if system.startswith(("win", "cygwin", "msys")):
            os_name = "windows"
        else:
            os_name = system

        # Normalize architecture
        if machine in ("x86_64", "amd64"):
            arch = "amd64"
        elif machine in ("arm64", "aarch64"):
            arch = "arm64"
        elif machine in ("i386", "i686", "x86"):
            arch = "386"
        elif machine.startswith("arm"):
            arch = "arm"
        else:
            arch = machine

        return cls(os=os_name, arch=arch)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return generate_suffixes(self.os, self.arch)


def generate_suffixes(os_name: str, arch: str) -> tuple[str, ...]:
    """Generate the asset name suffixes that mark a build for os_name/arch.

    Every combination of separator and archive extension is produced, e.g.
    ``linux_amd64.tar.gz`` or ``darwin-arm64``. On Windows the executable
    variants (``windows_amd64.exe.zip``) are included as well. Any suffix is
    as good as another.
    """
    suffixes = []
    for sep in SEPARATORS:
        for ext in EXTENSIONS:
            suffixes.append(f"{os_name}{sep}{arch}{ext}")
            if os_name == "windows":
                suffixes.append(f"{os_name}{sep}{arch}.exe{ext}")
    return tuple(suffixes)


def get_platform_info() -> PlatformInfo:
    """Get current platform information."""
    return PlatformInfo.detect()
