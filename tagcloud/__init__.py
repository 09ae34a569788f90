"""Deterministic word-cloud layout for tutoring growth tags."""

__version__ = "0.1.0"
