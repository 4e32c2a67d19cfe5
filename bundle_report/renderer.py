"""Report renderer - flattens a BundleReport into indented, size-annotated lines."""

from typing import List, Sequence

from .models import ArtifactNode, BundleReport, RenderedLine

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

# Containers always printed as a single line
OPAQUE_SUFFIXES = (".car", ".lproj")

INDENT_WIDTH = 4
BULLET = "∙"


def format_size(size: int) -> str:
    """Format a byte count with 1024-based units, e.g. 1536 -> "1.5KB".

    Scaling stops at TB. The value keeps one decimal digit, rounded the way
    Python's float formatting rounds (ties to even on the binary value).
    """
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    return f"{value:.1f}{SIZE_UNITS[unit_index]}"


def sort_by_size(artifacts: Sequence[ArtifactNode]) -> List[ArtifactNode]:
    """Largest first; artifacts of equal size keep the engine's order."""
    return sorted(artifacts, key=lambda artifact: artifact.size, reverse=True)


def should_expand(artifact: ArtifactNode) -> bool:
    """Whether the artifact's children are listed in the report."""
    return not artifact.path.endswith(OPAQUE_SUFFIXES)


def analyze_artifact(artifact: ArtifactNode, indent: int, contents: List[RenderedLine]) -> None:
    """Append the artifact and, unless it is opaque, its sorted subtree (pre-order)."""
    contents.append(RenderedLine(f"{artifact.name}: {format_size(artifact.size)}", indent))

    if not should_expand(artifact) or not artifact.children:
        return

    for child in sort_by_size(artifact.children):
        analyze_artifact(child, indent + 1, contents)


def flatten_artifacts(artifacts: Sequence[ArtifactNode]) -> List[RenderedLine]:
    contents: List[RenderedLine] = []
    for artifact in sort_by_size(artifacts):
        analyze_artifact(artifact, 0, contents)
    return contents


def summary_lines(report: BundleReport) -> List[str]:
    lines = [f"{report.name} ({report.version}) bundle report is ready:"]

    if report.download_size is not None:
        lines.append(f"Download size: {format_size(report.download_size)}")

    lines.append(f"Install size: {format_size(report.install_size)}")
    lines.append(f"Total artifacts: {len(report.artifacts)}")
    lines.append("")  # separates the summary from the artifact tree
    return lines


def format_line(line: RenderedLine) -> str:
    return " " * (line.indent * INDENT_WIDTH) + BULLET + " " + line.text


def render_report(report: BundleReport) -> List[str]:
    """Render the full report: summary lines followed by the artifact tree."""
    tree = flatten_artifacts(report.artifacts)
    return summary_lines(report) + [format_line(line) for line in tree]
