"""Conversion of recognizer output into word timelines."""

from .timeline import TimelineBuild, build_timeline

__all__ = ["TimelineBuild", "build_timeline"]
