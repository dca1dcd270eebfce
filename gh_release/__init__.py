"""GitHub milestone, changelog and release automation."""

__version__ = "0.1.0"
