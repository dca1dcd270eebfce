"""Collect resolved issues into a milestone."""

import logging

from pydantic import BaseModel, Field

from ..github_client.client import GitHubClient
from ..github_client.models import GitHubIssue
from .fixes import issue_numbers_from_commits

logger = logging.getLogger(__name__)


class SkippedIssue(BaseModel):
    """An issue the synchronizer left untouched."""

    number: int
    reason: str


class SyncResult(BaseModel):
    """Outcome of a milestone synchronization."""

    milestone: str = Field(..., description="Milestone title")
    created: bool = Field(
        False, description="Whether the milestone was (or would be) created"
    )
    dry_run: bool = Field(False, description="Whether mutations were suppressed")
    referenced: list[int] = Field(
        default_factory=list, description="Issue numbers referenced by the commits"
    )
    marked: list[int] = Field(
        default_factory=list, description="Issues assigned (or to be assigned)"
    )
    skipped: list[SkippedIssue] = Field(default_factory=list)


def _skip_reason(
    issue: GitHubIssue, milestone_number: int | None, force: bool
) -> str | None:
    """Return why an issue must not be marked, or None to mark it."""
    if issue.is_pull_request:
        return "is a pull request"
    if issue.state != "closed":
        return "is not closed"
    if issue.milestone_number is not None:
        if issue.milestone_number == milestone_number:
            return "is already correctly marked"
        if not force:
            return "is already marked with another milestone"
    return None


def sync_milestone(
    client: GitHubClient,
    owner: str,
    repo: str,
    since: str,
    to: str,
    title: str,
    force: bool = False,
    dry_run: bool = False,
) -> SyncResult:
    """Ensure a milestone exists and holds every closed issue fixed in a commit range.

    Args:
        client: GitHub client
        owner: Repository owner
        repo: Repository name
        since: Start tag or commit (exclusive)
        to: End tag or commit (inclusive)
        title: Milestone title
        force: Move issues already assigned to another milestone
        dry_run: Log intended changes without making them

    Returns:
        Summary of what was (or would be) done

    Raises:
        GithubException: If the milestone cannot be created or the commits
            cannot be listed
    """
    result = SyncResult(milestone=title, dry_run=dry_run)

    milestone = client.find_milestone(owner, repo, title)
    if milestone is None:
        logger.info(f"Creating milestone {title}")
        result.created = True
        if not dry_run:
            milestone = client.create_milestone(owner, repo, title)
    milestone_number = milestone.number if milestone is not None else None

    commits = client.compare_commits(owner, repo, since, to)
    result.referenced = issue_numbers_from_commits(commits)
    logger.debug(
        f"{len(commits)} commits in {since}..{to} reference "
        f"{len(result.referenced)} issues"
    )

    for number in result.referenced:
        try:
            issue = client.get_issue(owner, repo, number)
        except Exception as e:
            logger.error(f"Getting issue #{number}: {e}")
            result.skipped.append(SkippedIssue(number=number, reason=str(e)))
            continue

        reason = _skip_reason(issue, milestone_number, force)
        if reason is not None:
            logger.info(f"Issue #{number} {reason}; not marking")
            result.skipped.append(SkippedIssue(number=number, reason=reason))
            continue

        logger.info(f"Marking issue #{number}")
        if not dry_run:
            try:
                client.set_issue_milestone(owner, repo, number, milestone_number)
            except Exception as e:
                logger.error(f"Setting milestone on issue #{number}: {e}")
                result.skipped.append(SkippedIssue(number=number, reason=str(e)))
                continue
        result.marked.append(number)

    return result
