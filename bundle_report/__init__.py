"""Bundle report - validate an app archive and render its size breakdown."""

from .errors import AnalysisFailure, BundleReportError, ErrorKind, ValidationError
from .models import ArchivePath, ArtifactNode, BundleReport, RenderedLine
from .renderer import format_size, render_report
from .validator import validate_archive_path

__all__ = [
    "AnalysisFailure",
    "ArchivePath",
    "ArtifactNode",
    "BundleReport",
    "BundleReportError",
    "ErrorKind",
    "RenderedLine",
    "ValidationError",
    "format_size",
    "render_report",
    "validate_archive_path",
]
