"""Error taxonomy shared by the validator, engines and CLI."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of fatal errors a run can end with"""

    INVALID_INPUT = "invalid_input"
    ANALYSIS_FAILURE = "analysis_failure"


class BundleReportError(Exception):
    """Base class for all bundle report errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BundleReportError):
    """The archive path does not resolve, does not exist or is not an IPA."""

    kind = ErrorKind.INVALID_INPUT


class AnalysisFailure(BundleReportError):
    """The analysis engine could not analyze the archive."""

    kind = ErrorKind.ANALYSIS_FAILURE
