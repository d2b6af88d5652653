"""Checksum validators for release assets.

A validator names the companion file that accompanies each asset (the asset
name plus the validator's suffix) and checks downloaded bytes against it.
"""

import hashlib
import re
from pathlib import Path
from typing import Protocol

from selfupdate.core.errors import SelfUpdateError


class ChecksumError(SelfUpdateError):
    """Checksum verification failed."""

    pass


class Validator(Protocol):
    """Verifies an asset against its validation file."""

    suffix: str

    def validate(self, data: bytes, checksum_content: bytes) -> None: ...


def calculate_sha256(file_path: Path) -> str:
    """Calculate SHA256 hash of a file."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def parse_checksum_file(content: str, target_filename: str | None = None) -> str | None:
    """Parse a checksum file and find the hash for target file.

    Supports formats:
    - <hash>
    - <hash>  <filename>
    - <hash> *<filename>
    - <filename>: <hash>

    A bare hash is accepted for any target; with no target the first hash wins.
    """
    target = target_filename.lower() if target_filename else None

    for line in content.strip().splitlines():
        line = line.strip()
        if not line:
            continue

        # Format: hash (single-file checksum)
        match = re.fullmatch(r"[a-fA-F0-9]{64}", line)
        if match:
            return line.lower()

        # Format: hash  filename or hash *filename
        match = re.match(r"([a-fA-F0-9]{64})\s+\*?(.+)", line)
        if match:
            hash_value, filename = match.groups()
            if target is None or filename.lower() == target:
                return hash_value.lower()

        # Format: filename: hash
        match = re.match(r"(.+?):\s*([a-fA-F0-9]{64})", line)
        if match:
            filename, hash_value = match.groups()
            if target is None or filename.lower() == target:
                return hash_value.lower()

    return None


class SHA256Validator:
    """Validates assets against ``<asset>.sha256`` files."""

    suffix = ".sha256"

    def __init__(self, filename: str | None = None):
        self.filename = filename

    def validate(self, data: bytes, checksum_content: bytes) -> None:
        """Raise ChecksumError unless ``data`` hashes to the published value."""
        self._compare(hashlib.sha256(data).hexdigest(), checksum_content)

    def validate_file(self, file_path: Path, checksum_content: bytes) -> None:
        """Like validate(), reading the asset from disk."""
        self._compare(calculate_sha256(file_path), checksum_content)

    def _compare(self, actual: str, checksum_content: bytes) -> None:
        expected = parse_checksum_file(
            checksum_content.decode("utf-8", errors="replace"), self.filename
        )
        if expected is None:
            raise ChecksumError("No SHA256 hash found in validation file")

        if actual != expected:
            target = f" for {self.filename}" if self.filename else ""
            raise ChecksumError(
                f"Checksum mismatch{target}:\n"
                f"  Expected: {expected}\n"
                f"  Got:      {actual}"
            )


VALIDATORS = {
    "sha256": SHA256Validator,
}


def get_validator(name: str) -> Validator:
    """Create a validator by its short name."""
    try:
        return VALIDATORS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown validator: {name}. Choose from {', '.join(VALIDATORS)}.") from None
