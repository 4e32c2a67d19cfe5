"""Engine adapter that runs an external analyzer and decodes its JSON report."""

import shlex
import subprocess
from typing import List, Sequence

from loguru import logger
from pydantic import ValidationError as SchemaError

from bundle_report.engines.base import AnalysisEngine
from bundle_report.errors import AnalysisFailure
from bundle_report.models import ArchivePath, BundleReport

PATH_PLACEHOLDER = "{path}"


class CommandEngine(AnalysisEngine):
    """Runs an analyzer command that prints a bundle report as JSON on stdout."""

    def __init__(self, command: Sequence[str]):
        if not command:
            raise ValueError("Engine command must not be empty")
        self.command = list(command)

    def build_args(self, path: ArchivePath) -> List[str]:
        """Substitute the archive path for the placeholder, or append it."""
        if not any(PATH_PLACEHOLDER in arg for arg in self.command):
            return self.command + [str(path)]
        return [arg.replace(PATH_PLACEHOLDER, str(path)) for arg in self.command]

    def analyze(self, path: ArchivePath) -> BundleReport:
        args = self.build_args(path)
        logger.debug(f"Running analysis engine: {shlex.join(args)}")

        try:
            completed = subprocess.run(args, capture_output=True, encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            logger.debug(f"Analysis engine not found: {e}")
            raise AnalysisFailure(f"Analysis engine not found: {args[0]}") from e
        except PermissionError as e:
            logger.debug(f"Analysis engine is not executable: {e}")
            raise AnalysisFailure(f"Analysis engine is not executable: {args[0]}") from e
        except OSError as e:
            logger.debug(f"Could not start analysis engine: {e}")
            raise AnalysisFailure(f"Could not run analysis engine {args[0]}: {e.strerror}") from e

        logger.debug(f"Analysis engine exited with status {completed.returncode}")

        if completed.returncode != 0:
            message = completed.stderr.strip() or completed.stdout.strip()
            logger.debug(f"Analysis engine failed: {message!r}")
            raise AnalysisFailure(message or f"Analysis engine exited with status {completed.returncode}")

        try:
            report = BundleReport.model_validate_json(completed.stdout)
        except SchemaError as e:
            logger.debug(f"Could not decode engine output: {completed.stdout[:200]!r}")
            raise AnalysisFailure(f"Invalid report from analysis engine: {e}") from e

        logger.debug(f"Engine reported {len(report.artifacts)} top-level artifacts")
        return report
