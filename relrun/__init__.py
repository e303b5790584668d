"""Run release-please with the minor-breaking versioning strategy."""

__version__ = "0.1.0"
