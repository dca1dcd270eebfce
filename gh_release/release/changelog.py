"""Changelog rendering from milestone issues."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..errors import MilestoneNotFoundError
from ..github_client.client import GitHubClient
from ..github_client.models import GitHubIssue, GitHubMilestone
from .naming import milestone_for_release

logger = logging.getLogger(__name__)

WRAP_WIDTH = 72
BULLET_MARKERS = ("-", "*")
BULLET_INDENT = "  "

BUG_LABEL = "bug"
ENHANCEMENT_LABEL = "enhancement"


class ChangelogSections(BaseModel):
    """Issues of a milestone bucketed by kind, each in ascending number order."""

    bugfixes: list[GitHubIssue] = Field(default_factory=list)
    enhancements: list[GitHubIssue] = Field(default_factory=list)
    other: list[GitHubIssue] = Field(default_factory=list)

    def titled(self, markdown: bool) -> list[tuple[str, list[GitHubIssue]]]:
        """Return (section heading, issues) pairs in rendering order."""
        if markdown:
            titles = ("## Bugfixes", "## Enhancements", "## Other issues")
        else:
            titles = ("Bugfixes:", "Enhancements:", "Other issues:")
        return list(zip(titles, (self.bugfixes, self.enhancements, self.other)))


def partition_issues(
    issues: Iterable[GitHubIssue], skip_labels: Iterable[str] = ()
) -> ChangelogSections:
    """Sort milestone issues into changelog sections.

    Pull requests and issues carrying any of ``skip_labels`` are dropped. An
    issue labelled both ``bug`` and ``enhancement`` counts as a bugfix.
    """
    skip = set(skip_labels)
    sections = ChangelogSections()
    for issue in sorted(issues, key=lambda issue: issue.number):
        if issue.is_pull_request:
            continue

        labels = issue.label_names
        skipped = labels & skip
        if skipped:
            logger.debug(f"Skipping issue #{issue.number} labelled {sorted(skipped)}")
            continue

        if BUG_LABEL in labels:
            sections.bugfixes.append(issue)
        elif ENHANCEMENT_LABEL in labels:
            sections.enhancements.append(issue)
        else:
            sections.other.append(issue)
    return sections


def wrap_paragraph(line: str, width: int = WRAP_WIDTH) -> str:
    """Greedily pack the words of one line into lines of at most ``width``.

    Continuation lines of a bullet ("- " or "* ") are indented by two spaces;
    an indented word longer than the remaining width still overruns it.
    """
    words = line.split()
    if not words:
        return ""

    indent = BULLET_INDENT if words[0] in BULLET_MARKERS else ""
    lines: list[str] = []
    current = ""
    for word in words:
        if not current:
            current = word
        elif len(current) + 1 + len(word) > width:
            lines.append(current)
            current = indent + word
        else:
            current = f"{current} {word}"
    lines.append(current)
    return "\n".join(lines)


def wrap_text(text: str, width: int = WRAP_WIDTH) -> str:
    """Wrap every line of ``text`` separately, keeping blank lines."""
    return "\n".join(wrap_paragraph(line, width) for line in text.split("\n"))


def _issue_line(issue: GitHubIssue, markdown: bool) -> str:
    if markdown:
        return f"- [#{issue.number}]({issue.html_url}): {issue.title}"
    return f"- #{issue.number}: {issue.title}"


def render_changelog(
    release: str,
    sections: ChangelogSections,
    description: str | None = None,
    owner: str = "",
    repo: str = "",
    markdown: bool = False,
    with_subject: bool = True,
) -> str:
    """Render the changelog text for a release.

    Args:
        release: Release or milestone name used in the heading
        sections: Partitioned milestone issues
        description: Milestone description, wrapped to 72 columns
        owner: Repository owner, for the markdown heading link
        repo: Repository name, for the markdown heading link
        markdown: Render markdown headings and issue links
        with_subject: Start with a heading naming the release

    Returns:
        Changelog text ending with a blank line
    """
    parts: list[str] = []

    if with_subject:
        if markdown:
            url = f"https://github.com/{owner}/{repo}/releases/{release}"
            parts.append(f"# [{release}]({url})\n\n")
        else:
            parts.append(f"{release}\n\n")

    description = (description or "").strip()
    if description:
        parts.append(f"{wrap_text(description)}\n\n")

    for title, issues in sections.titled(markdown):
        if not issues:
            continue
        lines = "".join(f"{_issue_line(issue, markdown)}\n" for issue in issues)
        parts.append(f"{title}\n\n{lines}\n")

    return "".join(parts)


def require_milestone(
    client: GitHubClient, owner: str, repo: str, title: str
) -> GitHubMilestone:
    """Look up a milestone by title, raising if it does not exist."""
    milestone = client.find_milestone(owner, repo, title)
    if milestone is None:
        raise MilestoneNotFoundError(title)
    return milestone


def changelog_for_milestone(
    client: GitHubClient,
    owner: str,
    repo: str,
    release: str,
    milestone: GitHubMilestone,
    markdown: bool = False,
    skip_labels: Iterable[str] = (),
    with_subject: bool = True,
) -> str:
    """Fetch a milestone's issues and render them as the changelog of ``release``."""
    issues = client.list_milestone_issues(owner, repo, milestone.number)
    logger.debug(f"Milestone {milestone.title} has {len(issues)} issues")

    sections = partition_issues(issues, skip_labels)
    return render_changelog(
        release,
        sections,
        description=milestone.description,
        owner=owner,
        repo=repo,
        markdown=markdown,
        with_subject=with_subject,
    )


def generate_changelog(
    client: GitHubClient,
    owner: str,
    repo: str,
    release: str,
    markdown: bool = False,
    skip_labels: Iterable[str] = (),
    with_subject: bool = True,
) -> str:
    """Render the changelog for a release or milestone name.

    Raises:
        MilestoneNotFoundError: If the release's milestone does not exist
    """
    milestone = require_milestone(client, owner, repo, milestone_for_release(release))
    return changelog_for_milestone(
        client,
        owner,
        repo,
        release,
        milestone,
        markdown=markdown,
        skip_labels=skip_labels,
        with_subject=with_subject,
    )
