"""Publish a GitHub release from a milestone's changelog."""

import logging
from collections.abc import Iterable

from ..github_client.client import GitHubClient
from ..github_client.models import GitHubRelease
from .changelog import changelog_for_milestone, require_milestone
from .naming import is_prerelease, milestone_for_release

logger = logging.getLogger(__name__)


def publish_release(
    client: GitHubClient,
    owner: str,
    repo: str,
    release: str,
    skip_labels: Iterable[str] = (),
    dry_run: bool = False,
) -> GitHubRelease:
    """Create a release named after a milestone, with its changelog as body.

    Final releases (name equal to the milestone title) close the milestone,
    prereleases such as ``v1.2.0-rc.1`` leave it open.

    Args:
        client: GitHub client
        owner: Repository owner
        repo: Repository name
        release: Release name, used as tag name as well
        skip_labels: Issue labels to leave out of the changelog
        dry_run: Log intended changes without making them

    Returns:
        The created release. In dry-run mode, the release that would have
        been created, with an empty URL

    Raises:
        MilestoneNotFoundError: If the release's milestone does not exist
        GithubException: If creating the release or closing the milestone fails
    """
    title = milestone_for_release(release)
    prerelease = is_prerelease(release)

    milestone = require_milestone(client, owner, repo, title)
    body = changelog_for_milestone(
        client,
        owner,
        repo,
        release,
        milestone,
        markdown=False,
        skip_labels=skip_labels,
        with_subject=False,
    )

    kind = "prerelease" if prerelease else "release"
    if dry_run:
        logger.info(f"Would create {kind} {release}")
        if not prerelease:
            logger.info(f"Would close milestone {title}")
        return GitHubRelease(
            name=release,
            tag_name=release,
            body=body,
            prerelease=prerelease,
            draft=False,
        )

    logger.info(f"Creating {kind} {release}")
    created = client.create_release(owner, repo, release, body, prerelease)

    if not prerelease:
        logger.info(f"Closing milestone {title}")
        client.close_milestone(owner, repo, milestone.number)

    return created
