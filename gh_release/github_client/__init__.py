"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import (
    GitHubCommit,
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubRelease,
)

__all__ = [
    "GitHubClient",
    "GitHubCommit",
    "GitHubIssue",
    "GitHubLabel",
    "GitHubMilestone",
    "GitHubRelease",
]
