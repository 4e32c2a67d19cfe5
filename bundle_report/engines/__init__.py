"""Analysis engines - produce BundleReports for validated archives."""

from .base import AnalysisEngine
from .command import CommandEngine

__all__ = [
    "AnalysisEngine",
    "CommandEngine",
]
