"""Shared test doubles and builders."""

from typing import List, Optional

from bundle_report.engines import AnalysisEngine
from bundle_report.errors import AnalysisFailure
from bundle_report.models import ArchivePath, ArtifactNode, BundleReport


class FakeEngine(AnalysisEngine):
    """Returns a canned report, or fails with a canned message."""

    def __init__(self, report: Optional[BundleReport] = None, failure: Optional[str] = None):
        self.report = report
        self.failure = failure
        self.calls: List[ArchivePath] = []

    def analyze(self, path: ArchivePath) -> BundleReport:
        self.calls.append(path)
        if self.failure is not None:
            raise AnalysisFailure(self.failure)
        return self.report


def make_node(path: str, size: int, children: Optional[List[ArtifactNode]] = None) -> ArtifactNode:
    return ArtifactNode(path=path, size=size, children=children)
