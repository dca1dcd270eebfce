"""Extraction of issue references from commit subjects."""

import re
from collections.abc import Iterable

from ..github_client.models import GitHubCommit

FIXES_PATTERN = re.compile(r"fixes #(\d+)")
# Squash-merged pull requests end their subject with "(#123)"
PULL_REQUEST_PATTERN = re.compile(r"\(#(\d+)\)$")


def _subject(message: str) -> str:
    return message.split("\n", 1)[0]


def _subject_references(subject: str) -> list[str]:
    references = FIXES_PATTERN.findall(subject)
    match = PULL_REQUEST_PATTERN.search(subject)
    if match:
        references.append(match.group(1))
    return references


def extract_issue_numbers(messages: Iterable[str]) -> list[int]:
    """Collect the issue numbers referenced by commit messages.

    Only the subject line of each message is scanned, for ``fixes #N``
    anywhere in it and for a trailing ``(#N)``.

    Args:
        messages: Commit messages in any order

    Returns:
        Referenced issue numbers, deduplicated and sorted ascending
    """
    seen: set[int] = set()
    numbers: list[int] = []
    for message in messages:
        for reference in _subject_references(_subject(message)):
            try:
                number = int(reference)
            except ValueError:
                continue
            if number in seen:
                continue
            seen.add(number)
            numbers.append(number)
    return sorted(numbers)


def issue_numbers_from_commits(commits: Iterable[GitHubCommit]) -> list[int]:
    """Collect the issue numbers referenced by a sequence of commits."""
    return extract_issue_numbers(commit.message for commit in commits)
