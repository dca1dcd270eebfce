"""Release workflow: milestone sync, changelog rendering and publishing."""

from .changelog import (
    ChangelogSections,
    generate_changelog,
    partition_issues,
    render_changelog,
    wrap_text,
)
from .fixes import extract_issue_numbers, issue_numbers_from_commits
from .milestone import SkippedIssue, SyncResult, sync_milestone
from .naming import is_prerelease, milestone_for_release
from .publish import publish_release

__all__ = [
    "ChangelogSections",
    "SkippedIssue",
    "SyncResult",
    "extract_issue_numbers",
    "generate_changelog",
    "is_prerelease",
    "issue_numbers_from_commits",
    "milestone_for_release",
    "partition_issues",
    "publish_release",
    "render_changelog",
    "sync_milestone",
    "wrap_text",
]
