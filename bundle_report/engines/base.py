from abc import ABC, abstractmethod

from bundle_report.models import ArchivePath, BundleReport


class AnalysisEngine(ABC):
    """
    Interface for the external engine that measures an archive.
    Owns archive parsing and size computation; the report is taken as-is.
    """

    @abstractmethod
    def analyze(self, path: ArchivePath) -> BundleReport:
        """
        Analyze the archive and return its size report.

        Args:
            path: The validated archive to analyze

        Raises:
            AnalysisFailure: If the engine could not analyze the archive
        """
        pass
