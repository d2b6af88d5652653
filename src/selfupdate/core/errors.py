"""Errors raised by selfupdate."""


class SelfUpdateError(Exception):
    """Base class for selfupdate errors."""

    pass


class ValidationAssetMissingError(SelfUpdateError):
    """A validator is configured but the release has no matching validation file."""

    def __init__(self, validation_name: str):
        self.validation_name = validation_name
        super().__init__(f"Failed finding validation file {validation_name!r}")
