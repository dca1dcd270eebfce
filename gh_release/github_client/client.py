"""GitHub API client using PyGitHub."""

import logging
import os
import time
from collections.abc import Callable
from typing import TypeVar

from github import Github
from github.Commit import Commit
from github.GithubException import RateLimitExceededException, UnknownObjectException
from github.GitRelease import GitRelease
from github.Issue import Issue
from github.Label import Label
from github.Milestone import Milestone
from github.Repository import Repository

from .models import (
    GitHubCommit,
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubRelease,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATE_LIMIT_RETRY_SECONDS = 60


class GitHubClient:
    """GitHub API client with rate limiting and optional authentication.

    Every list method walks PyGitHub's paginated results to the end, so
    callers always receive fully materialized lists.
    """

    def __init__(self, token: str | None = None):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var. Without a token the client is
                unauthenticated and subject to lower rate limits.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if self.token:
            self.github = Github(self.token)
        else:
            logger.warning(
                "GITHUB_TOKEN not set, using unauthenticated (rate limited) access"
            )
            self.github = Github()
        self._repositories: dict[str, Repository] = {}

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
            logger.debug(f"GitHub API rate limit: {remaining} requests remaining")

            if remaining < 10:
                reset_time = rate_limit.rate.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                logger.warning(
                    f"Rate limit low, sleeping for {sleep_time:.1f} seconds..."
                )
                time.sleep(sleep_time)

        except Exception as e:
            # The check is advisory, the call itself still enforces the limit
            logger.debug(f"Could not check rate limit: {e}")

    def _retry_on_rate_limit(self, action: str, call: Callable[[], T]) -> T:
        """Run a GitHub call, waiting and retrying when the rate limit is hit."""
        while True:
            try:
                return call()
            except RateLimitExceededException:
                logger.warning(f"Rate limit exceeded during {action}, waiting...")
                time.sleep(RATE_LIMIT_RETRY_SECONDS)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(name=github_label.name)

    def _convert_milestone(self, github_milestone: Milestone) -> GitHubMilestone:
        """Convert PyGitHub milestone to our model."""
        return GitHubMilestone(
            number=github_milestone.number,
            title=github_milestone.title,
            state=github_milestone.state,
            description=github_milestone.description,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        milestone_number = None
        if github_issue.milestone is not None:
            milestone_number = github_issue.milestone.number

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            state=github_issue.state,
            labels=[self._convert_label(label) for label in github_issue.labels],
            milestone_number=milestone_number,
            html_url=github_issue.html_url,
            is_pull_request=github_issue.pull_request is not None,
        )

    def _convert_commit(self, github_commit: Commit) -> GitHubCommit:
        """Convert PyGitHub commit to our model."""
        return GitHubCommit(
            sha=github_commit.sha,
            message=github_commit.commit.message or "",
        )

    def _convert_release(self, github_release: GitRelease) -> GitHubRelease:
        """Convert PyGitHub release to our model."""
        return GitHubRelease(
            name=github_release.title,
            tag_name=github_release.tag_name,
            body=github_release.body or "",
            prerelease=github_release.prerelease,
            draft=github_release.draft,
            html_url=github_release.html_url,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        full_name = f"{owner}/{repo}"
        if full_name not in self._repositories:
            try:
                self._repositories[full_name] = self.github.get_repo(full_name)
            except UnknownObjectException:
                raise ValueError(f"Repository {full_name} not found")
        return self._repositories[full_name]

    def list_milestones(self, owner: str, repo: str) -> list[GitHubMilestone]:
        """List all milestones of a repository, open and closed."""
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        return self._retry_on_rate_limit(
            "milestone listing",
            lambda: [
                self._convert_milestone(milestone)
                for milestone in repository.get_milestones(state="all")
            ],
        )

    def find_milestone(
        self, owner: str, repo: str, title: str
    ) -> GitHubMilestone | None:
        """Find the milestone with exactly the given title.

        Args:
            owner: Repository owner
            repo: Repository name
            title: Milestone title to match

        Returns:
            The first matching milestone, or None if there is none
        """
        for milestone in self.list_milestones(owner, repo):
            if milestone.title == title:
                return milestone
        return None

    def create_milestone(self, owner: str, repo: str, title: str) -> GitHubMilestone:
        """Create an open milestone with the given title."""
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        github_milestone = self._retry_on_rate_limit(
            "milestone creation", lambda: repository.create_milestone(title=title)
        )
        logger.debug(f"Created milestone {title} (#{github_milestone.number})")
        return self._convert_milestone(github_milestone)

    def close_milestone(self, owner: str, repo: str, number: int) -> GitHubMilestone:
        """Set a milestone's state to closed.

        Raises:
            ValueError: If the milestone does not exist
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)

        def close() -> Milestone:
            github_milestone = repository.get_milestone(number)
            github_milestone.edit(github_milestone.title, state="closed")
            return github_milestone

        try:
            github_milestone = self._retry_on_rate_limit("milestone update", close)
        except UnknownObjectException:
            raise ValueError(f"Milestone #{number} not found in {owner}/{repo}")
        return self._convert_milestone(github_milestone)

    def get_issue(self, owner: str, repo: str, issue_number: int) -> GitHubIssue:
        """Get a specific issue.

        Raises:
            ValueError: If the issue does not exist
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        try:
            github_issue = self._retry_on_rate_limit(
                "issue fetch", lambda: repository.get_issue(issue_number)
            )
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")
        return self._convert_issue(github_issue)

    def list_milestone_issues(
        self, owner: str, repo: str, milestone_number: int
    ) -> list[GitHubIssue]:
        """List every issue and pull request in a milestone, in any state."""
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)

        def fetch() -> list[GitHubIssue]:
            github_milestone = repository.get_milestone(milestone_number)
            return [
                self._convert_issue(github_issue)
                for github_issue in repository.get_issues(
                    milestone=github_milestone, state="all"
                )
            ]

        try:
            return self._retry_on_rate_limit("issue listing", fetch)
        except UnknownObjectException:
            raise ValueError(
                f"Milestone #{milestone_number} not found in {owner}/{repo}"
            )

    def set_issue_milestone(
        self, owner: str, repo: str, issue_number: int, milestone_number: int
    ) -> None:
        """Assign an issue to a milestone.

        Raises:
            ValueError: If the issue or milestone does not exist
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)

        def assign() -> None:
            github_milestone = repository.get_milestone(milestone_number)
            github_issue = repository.get_issue(issue_number)
            github_issue.edit(milestone=github_milestone)

        try:
            self._retry_on_rate_limit("issue update", assign)
        except UnknownObjectException:
            raise ValueError(
                f"Issue #{issue_number} or milestone #{milestone_number} "
                f"not found in {owner}/{repo}"
            )

    def compare_commits(
        self, owner: str, repo: str, base: str, head: str
    ) -> list[GitHubCommit]:
        """List the commits reachable from head but not from base."""
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        return self._retry_on_rate_limit(
            "commit comparison",
            lambda: [
                self._convert_commit(commit)
                for commit in repository.compare(base, head).commits
            ],
        )

    def create_release(
        self, owner: str, repo: str, name: str, body: str, prerelease: bool
    ) -> GitHubRelease:
        """Publish a release whose name and tag are both ``name``.

        Args:
            owner: Repository owner
            repo: Repository name
            name: Release name, also used as tag name
            body: Release notes
            prerelease: Mark the release as a prerelease

        Returns:
            The created release
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        github_release = self._retry_on_rate_limit(
            "release creation",
            lambda: repository.create_git_release(
                tag=name,
                name=name,
                message=body,
                draft=False,
                prerelease=prerelease,
            ),
        )
        return self._convert_release(github_release)
