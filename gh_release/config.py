"""Configuration for the release tool."""

import os

from .errors import ConfigurationError


def parse_label_list(value: str | None) -> list[str]:
    """Split a comma-separated label list, dropping empty entries."""
    if not value:
        return []
    return [label.strip() for label in value.split(",") if label.strip()]


class ReleaseToolConfig:
    """Configuration class for GitHub access and repository selection."""

    def __init__(
        self,
        owner: str | None = None,
        repo: str | None = None,
        token: str | None = None,
    ) -> None:
        """Initialize configuration from explicit values and environment variables.

        Args:
            owner: Repository owner. Falls back to GRT_OWNER.
            repo: Repository name. Falls back to GRT_REPO.
            token: GitHub token. Falls back to GITHUB_TOKEN.
        """
        self.owner: str | None = owner or os.getenv("GRT_OWNER")
        self.repo: str | None = repo or os.getenv("GRT_REPO")
        self.token: str | None = token or os.getenv("GITHUB_TOKEN")
        self.skip_labels: list[str] = parse_label_list(os.getenv("GRT_SKIPLABELS"))

    def resolve_skip_labels(self, labels: list[str] | None) -> list[str]:
        """Return labels given on the command line, else the environment default."""
        if labels:
            return list(labels)
        return list(self.skip_labels)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing = []
        if not self.owner:
            missing.append("--owner (or GRT_OWNER)")
        if not self.repo:
            missing.append("--repo (or GRT_REPO)")

        if missing:
            raise ConfigurationError(
                f"Repository settings required: {', '.join(missing)}"
            )
