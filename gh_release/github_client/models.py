"""Pydantic models for GitHub data structures.

These models map to the subset of GitHub's REST API v3 responses that the
release workflow reads.
API Reference: https://docs.github.com/en/rest/issues
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the label (string)")


class GitHubMilestone(BaseModel):
    """GitHub milestone model grouping the issues of one release.

    Maps to GitHub REST API Milestone object.
    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Milestone number within the repository")
    title: str = Field(..., description="Milestone title, unique per repository")
    state: str = Field("open", description="Current state: 'open', 'closed'")
    description: str | None = Field(
        None, description="Free-text description in markdown (string)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object. Pull requests are returned by the
    issues endpoints as well and are flagged with ``is_pull_request``.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    milestone_number: int | None = Field(
        None, description="Number of the milestone the issue is assigned to"
    )
    html_url: str = Field("", description="Browser URL of the issue")
    is_pull_request: bool = Field(
        False, description="Whether the issue is actually a pull request"
    )

    @property
    def label_names(self) -> set[str]:
        """Names of all labels on the issue."""
        return {label.name for label in self.labels}


class GitHubCommit(BaseModel):
    """GitHub commit model as returned by the compare endpoint.

    API Reference: https://docs.github.com/en/rest/commits/commits
    """

    model_config = ConfigDict(frozen=True)

    sha: str = Field(..., description="Commit hash")
    message: str = Field("", description="Full commit message")

    @property
    def subject(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]


class GitHubRelease(BaseModel):
    """GitHub release model.

    API Reference: https://docs.github.com/en/rest/releases/releases
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Release title")
    tag_name: str = Field(..., description="Git tag the release points at")
    body: str = Field("", description="Release notes in markdown")
    prerelease: bool = Field(False, description="Whether this is a prerelease")
    draft: bool = Field(False, description="Whether this is an unpublished draft")
    html_url: str = Field("", description="Browser URL of the release")
