"""Exceptions raised by the release tool."""


class ReleaseToolError(Exception):
    """Base class for release tool failures."""


class ConfigurationError(ReleaseToolError, ValueError):
    """Raised when required settings are missing."""


class MilestoneNotFoundError(ReleaseToolError, LookupError):
    """Raised when no milestone carries the requested title."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Milestone '{title}' not found")
