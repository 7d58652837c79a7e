"""Data models for version specs and installed versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import semantic_version


class ResolutionMode(Enum):
    """Resolution strategy derived from the spec."""
    LATEST = "latest"
    RANGE = "range"


@dataclass(frozen=True)
class VersionSpec:
    """Normalized spec; ``constraint`` is set for RANGE mode only."""
    raw: str
    mode: ResolutionMode
    constraint: Optional[semantic_version.NpmSpec] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, order=True)
class InstalledVersion:
    """An installed runtime: parsed version plus the directory it lives in."""
    version: semantic_version.Version
    directory: str = field(compare=False)

    def __str__(self) -> str:
        return str(self.version)


@dataclass(frozen=True)
class SpecCandidate:
    """Raw spec text produced by one source, before normalization."""
    value: str
    source: str
    path: Optional[str] = None

    def describe(self) -> str:
        return f"{self.source} ({self.path})" if self.path else self.source
