"""Test configuration and fixtures."""

from collections.abc import Callable

import pytest

from gh_release.github_client.models import (
    GitHubCommit,
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubRelease,
)

MUTATING_CALLS = {
    "create_milestone",
    "close_milestone",
    "set_issue_milestone",
    "create_release",
}


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient that records every call."""

    def __init__(self) -> None:
        self.milestones: list[GitHubMilestone] = []
        self.issues: dict[int, GitHubIssue] = {}
        self.commits: list[GitHubCommit] = []
        self.failing_issues: set[int] = set()
        self.failing_edits: set[int] = set()
        self.calls: list[tuple] = []

    @property
    def mutations(self) -> list[tuple]:
        return [call for call in self.calls if call[0] in MUTATING_CALLS]

    def add_issue(self, issue: GitHubIssue) -> None:
        self.issues[issue.number] = issue

    def add_commit(self, message: str) -> None:
        self.commits.append(
            GitHubCommit(sha=f"{len(self.commits):040x}", message=message)
        )

    def find_milestone(
        self, owner: str, repo: str, title: str
    ) -> GitHubMilestone | None:
        self.calls.append(("find_milestone", title))
        for milestone in self.milestones:
            if milestone.title == title:
                return milestone
        return None

    def create_milestone(self, owner: str, repo: str, title: str) -> GitHubMilestone:
        self.calls.append(("create_milestone", title))
        number = max((m.number for m in self.milestones), default=0) + 1
        milestone = GitHubMilestone(number=number, title=title)
        self.milestones.append(milestone)
        return milestone

    def close_milestone(self, owner: str, repo: str, number: int) -> GitHubMilestone:
        self.calls.append(("close_milestone", number))
        for index, milestone in enumerate(self.milestones):
            if milestone.number == number:
                closed = milestone.model_copy(update={"state": "closed"})
                self.milestones[index] = closed
                return closed
        raise ValueError(f"Milestone #{number} not found in {owner}/{repo}")

    def get_issue(self, owner: str, repo: str, issue_number: int) -> GitHubIssue:
        self.calls.append(("get_issue", issue_number))
        if issue_number in self.failing_issues or issue_number not in self.issues:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")
        return self.issues[issue_number]

    def list_milestone_issues(
        self, owner: str, repo: str, milestone_number: int
    ) -> list[GitHubIssue]:
        self.calls.append(("list_milestone_issues", milestone_number))
        return [
            issue
            for issue in self.issues.values()
            if issue.milestone_number == milestone_number
        ]

    def set_issue_milestone(
        self, owner: str, repo: str, issue_number: int, milestone_number: int
    ) -> None:
        self.calls.append(("set_issue_milestone", issue_number, milestone_number))
        if issue_number in self.failing_edits:
            raise ValueError(f"Issue #{issue_number} could not be updated")
        self.issues[issue_number] = self.issues[issue_number].model_copy(
            update={"milestone_number": milestone_number}
        )

    def compare_commits(
        self, owner: str, repo: str, base: str, head: str
    ) -> list[GitHubCommit]:
        self.calls.append(("compare_commits", base, head))
        return list(self.commits)

    def create_release(
        self, owner: str, repo: str, name: str, body: str, prerelease: bool
    ) -> GitHubRelease:
        self.calls.append(("create_release", name, body, prerelease))
        return GitHubRelease(
            name=name,
            tag_name=name,
            body=body,
            prerelease=prerelease,
            html_url=f"https://github.com/{owner}/{repo}/releases/tag/{name}",
        )


@pytest.fixture
def fake_client() -> FakeGitHubClient:
    """Empty in-memory GitHub client."""
    return FakeGitHubClient()


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Factory for issue models with sensible defaults."""

    def factory(
        number: int,
        title: str = "Some issue",
        labels: tuple[str, ...] = (),
        state: str = "closed",
        milestone: int | None = None,
        pull_request: bool = False,
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title,
            state=state,
            labels=[GitHubLabel(name=name) for name in labels],
            milestone_number=milestone,
            html_url=f"https://github.com/testorg/testrepo/issues/{number}",
            is_pull_request=pull_request,
        )

    return factory
