"""
Models for bundle reports.

The analysis engine emits camelCase JSON, so report models accept both the
engine's aliases and the Python field names.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Input
# ============================================================================


@dataclass(frozen=True)
class ArchivePath:
    """Absolute, normalized path to an existing IPA archive."""

    path: Path

    def __str__(self) -> str:
        return str(self.path)


# ============================================================================
# Engine report
# ============================================================================


class EngineModel(BaseModel):
    """Base for read-only models decoded from the engine's JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ArtifactNode(EngineModel):
    """A file or directory-like unit inside the archive"""

    path: str = Field(description="Slash-delimited path relative to the archive root")
    size: int = Field(ge=0, description="Cumulative size in bytes, children included")
    children: Optional[List["ArtifactNode"]] = Field(
        default=None, description="None for leaf artifacts, a list for containers"
    )

    @property
    def name(self) -> str:
        """Final path segment."""
        return self.path.split("/")[-1]


class BundleReport(EngineModel):
    """Complete size breakdown of one archive"""

    name: str
    version: str
    install_size: int = Field(ge=0)
    download_size: Optional[int] = Field(
        default=None, ge=0, description="Estimated transfer size, absent when the engine cannot estimate it"
    )
    artifacts: List[ArtifactNode] = Field(default_factory=list)


# ============================================================================
# Output
# ============================================================================


class RenderedLine(NamedTuple):
    """One line of the flattened artifact tree."""

    text: str
    indent: int
