"""Test main CLI functionality."""

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gh_release.cli.main import app
from gh_release.github_client.models import GitHubIssue, GitHubMilestone

runner = CliRunner()

CLEAN_ENV = {
    "GRT_OWNER": None,
    "GRT_REPO": None,
    "GRT_SKIPLABELS": None,
    "GITHUB_TOKEN": None,
}
REPO_ARGS = ["--owner", "testorg", "--repo", "testrepo"]

IssueFactory = Callable[..., GitHubIssue]


@pytest.fixture
def cli_client(fake_client: Any) -> Generator[Any]:
    """Make the CLI use the in-memory client."""
    with patch(
        "gh_release.cli.common.GitHubClient", return_value=fake_client
    ) as mock_client_class:
        fake_client.client_class = mock_client_class
        yield fake_client


@pytest.fixture
def milestone_v1(cli_client: Any, make_issue: IssueFactory) -> Any:
    """Milestone v1.0.0 with a bug, an enhancement and an unlabelled issue."""
    cli_client.milestones = [GitHubMilestone(number=1, title="v1.0.0")]
    cli_client.add_issue(
        make_issue(1, title="Crash on start", labels=("bug",), milestone=1)
    )
    cli_client.add_issue(
        make_issue(2, title="Add flag", labels=("enhancement",), milestone=1)
    )
    cli_client.add_issue(make_issue(3, title="Typo", milestone=1))
    return cli_client


def invoke(args: list[str], env: dict[str, str | None] | None = None) -> Any:
    return runner.invoke(app, args, env={**CLEAN_ENV, **(env or {})})


def test_version_command() -> None:
    """Test version command."""
    result = invoke(["version"])
    assert result.exit_code == 0
    assert "GitHub Release Tool v" in result.stdout


def test_help_lists_commands() -> None:
    """Test the top-level help shows every subcommand."""
    result = invoke(["--help"])
    assert result.exit_code == 0
    for command in ("milestone", "changelog", "release", "version"):
        assert command in result.stdout


class TestChangelogCommand:
    """Test the changelog subcommand."""

    def test_plain_output(self, milestone_v1: Any) -> None:
        """Test the plain changelog goes to stdout verbatim."""
        result = invoke([*REPO_ARGS, "changelog", "v1.0.0"])

        assert result.exit_code == 0
        assert result.stdout == (
            "v1.0.0\n\n"
            "Bugfixes:\n\n- #1: Crash on start\n\n"
            "Enhancements:\n\n- #2: Add flag\n\n"
            "Other issues:\n\n- #3: Typo\n\n"
        )

    def test_markdown_output(self, milestone_v1: Any) -> None:
        """Test markdown links are written without markup interpretation."""
        result = invoke([*REPO_ARGS, "changelog", "--md", "v1.0.0"])

        assert result.exit_code == 0
        assert "# [v1.0.0](https://github.com/testorg/testrepo/releases/v1.0.0)" in (
            result.stdout
        )
        assert "- [#3](https://github.com/testorg/testrepo/issues/3): Typo" in (
            result.stdout
        )

    def test_skip_label_flag(self, milestone_v1: Any) -> None:
        """Test repeated --skip-label flags."""
        result = invoke(
            [
                *REPO_ARGS,
                "changelog",
                "--skip-label",
                "bug",
                "--skip-label",
                "enhancement",
                "v1.0.0",
            ]
        )

        assert result.exit_code == 0
        assert "Crash on start" not in result.stdout
        assert "Add flag" not in result.stdout
        assert "- #3: Typo" in result.stdout

    def test_skip_labels_from_environment(self, milestone_v1: Any) -> None:
        """Test GRT_SKIPLABELS applies when no flag is given."""
        result = invoke(
            ["changelog", "v1.0.0"],
            env={
                "GRT_OWNER": "testorg",
                "GRT_REPO": "testrepo",
                "GRT_SKIPLABELS": "bug,enhancement",
            },
        )

        assert result.exit_code == 0
        assert "Bugfixes" not in result.stdout
        assert "- #3: Typo" in result.stdout

    def test_missing_milestone(self, cli_client: Any) -> None:
        """Test an unknown milestone exits with an error."""
        result = invoke([*REPO_ARGS, "changelog", "v9.0.0"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_missing_repository_settings(self, cli_client: Any) -> None:
        """Test owner and repo are required."""
        result = invoke(["changelog", "v1.0.0"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert cli_client.calls == []

    def test_token_passed_to_client(self, milestone_v1: Any) -> None:
        """Test the token option reaches the GitHub client."""
        result = invoke(
            [*REPO_ARGS, "--token", "secret", "changelog", "v1.0.0"]
        )

        assert result.exit_code == 0
        milestone_v1.client_class.assert_called_once_with(token="secret")


class TestMilestoneCommand:
    """Test the milestone subcommand."""

    def test_marks_issues(self, cli_client: Any, make_issue: IssueFactory) -> None:
        """Test referenced issues are assigned to the milestone."""
        cli_client.milestones = [GitHubMilestone(number=2, title="v1.1.0")]
        cli_client.add_issue(make_issue(5))
        cli_client.add_commit("lib: Fix it, fixes #5")

        result = invoke([*REPO_ARGS, "milestone", "--from", "v1.0.0", "v1.1.0"])

        assert result.exit_code == 0
        assert ("compare_commits", "v1.0.0", "HEAD") in cli_client.calls
        assert cli_client.mutations == [("set_issue_milestone", 5, 2)]

    def test_dry_run(self, cli_client: Any, make_issue: IssueFactory) -> None:
        """Test dry run performs no mutations."""
        cli_client.add_issue(make_issue(5))
        cli_client.add_commit("lib: Fix it (#5)")

        result = invoke(
            [
                *REPO_ARGS,
                "milestone",
                "--from",
                "v1.0.0",
                "--to",
                "main",
                "--dry-run",
                "v1.1.0",
            ]
        )

        assert result.exit_code == 0
        assert ("compare_commits", "v1.0.0", "main") in cli_client.calls
        assert cli_client.mutations == []
        assert "Would mark" in result.output

    def test_from_is_required(self, cli_client: Any) -> None:
        """Test --from must be given."""
        result = invoke([*REPO_ARGS, "milestone", "v1.1.0"])

        assert result.exit_code != 0
        assert cli_client.calls == []


class TestReleaseCommand:
    """Test the release subcommand."""

    def test_final_release(self, milestone_v1: Any) -> None:
        """Test a final release is created and the milestone closed."""
        result = invoke([*REPO_ARGS, "release", "v1.0.0"])

        assert result.exit_code == 0
        assert [call[0] for call in milestone_v1.mutations] == [
            "create_release",
            "close_milestone",
        ]
        assert milestone_v1.mutations[0][3] is False

    def test_prerelease_with_to(self, milestone_v1: Any) -> None:
        """Test --to names a prerelease of the milestone."""
        result = invoke([*REPO_ARGS, "release", "--to", "v1.0.0-rc.1", "v1.0.0"])

        assert result.exit_code == 0
        assert [call[0] for call in milestone_v1.mutations] == ["create_release"]
        assert milestone_v1.mutations[0][1] == "v1.0.0-rc.1"
        assert milestone_v1.mutations[0][3] is True

    def test_to_must_match_milestone(self, milestone_v1: Any) -> None:
        """Test a release name from another milestone is rejected."""
        result = invoke([*REPO_ARGS, "release", "--to", "v2.0.0", "v1.0.0"])

        assert result.exit_code == 1
        assert milestone_v1.mutations == []

    def test_dry_run_prints_body(self, milestone_v1: Any) -> None:
        """Test dry run writes the release notes and changes nothing."""
        result = invoke([*REPO_ARGS, "release", "--dry-run", "v1.0.0"])

        assert result.exit_code == 0
        assert milestone_v1.mutations == []
        assert "Bugfixes:\n\n- #1: Crash on start\n" in result.stdout
        assert not result.stdout.startswith("v1.0.0")
