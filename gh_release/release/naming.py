"""Mapping between release names and milestone titles.

A release is named after its milestone, optionally followed by a ``-``
suffix for prereleases: ``v1.2.0-rc.1`` belongs to milestone ``v1.2.0``.
"""


def milestone_for_release(release: str) -> str:
    """Return the milestone title a release name belongs to."""
    return release.split("-", 1)[0]


def is_prerelease(release: str) -> bool:
    """Check whether a release name denotes a prerelease of its milestone."""
    return release != milestone_for_release(release)
