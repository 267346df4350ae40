"""Candidate intake: validation, duplicate detection and storage."""

__version__ = "0.1.0"
