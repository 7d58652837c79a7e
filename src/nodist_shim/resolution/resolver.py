"""Deciding which version spec applies to this invocation.

Sources are consulted in a fixed priority order and the first one that
produces a non-empty value wins:

1. ``NODE_VERSION``
2. ``NODIST_VERSION``
3. ``engines.node`` of the nearest ``package.json``
4. the nearest ``.node-version``
5. ``.node-version`` at the installation root

Reordering or adding a source is a change to ``default_sources()`` only.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import ShimConfig
from ..constants import Constants
from ..errors import SpecResolutionError, SpecUndecidedError
from ..versioning.models import SpecCandidate, VersionSpec
from ..versioning.parser import normalize_spec, parse_version_spec
from .manifest import read_manifest_engine
from .marker import read_marker_file
from .walker import find_upward

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """Inputs every source may look at."""
    config: ShimConfig
    search_dir: Path


def search_dir_for(args: Sequence[str], cwd: str) -> Path:
    """Directory the upward walks start from.

    That is the directory containing the first argument when there is one,
    resolved against ``cwd`` if relative, and ``cwd`` otherwise.
    """
    if not args:
        return Path(cwd)
    target_dir = os.path.dirname(args[0])
    return Path(os.path.normpath(os.path.join(cwd, target_dir)))


class SpecSource:
    """One place a version spec can come from."""

    name = "source"

    def find(self, ctx: ResolutionContext) -> Optional[SpecCandidate]:
        raise NotImplementedError


class EnvOverrideSource(SpecSource):
    """A value already captured from the environment into the config."""

    def __init__(self, name: str, attribute: str):
        self.name = name
        self.attribute = attribute

    def find(self, ctx: ResolutionContext) -> Optional[SpecCandidate]:
        value = getattr(ctx.config, self.attribute)
        if value is None:
            return None
        return SpecCandidate(value=value, source=self.name)


class ManifestSource(SpecSource):
    """``engines.node`` of the nearest manifest.

    The nearest manifest is authoritative even when it is broken or declares
    no engine: the walk does not go on to look for another one.
    """

    name = "package.json engines"

    def find(self, ctx: ResolutionContext) -> Optional[SpecCandidate]:
        found = find_upward(ctx.search_dir, Constants.PACKAGE_JSON_FILE, read_manifest_engine)
        if found is None:
            return None
        path, spec = found
        return SpecCandidate(value=spec, source=self.name, path=str(path))


class LocalMarkerSource(SpecSource):
    """The nearest ``.node-version`` above the search directory."""

    name = "local .node-version"

    def find(self, ctx: ResolutionContext) -> Optional[SpecCandidate]:
        found = find_upward(ctx.search_dir, Constants.NODE_VERSION_FILE, read_marker_file)
        if found is None:
            return None
        path, spec = found
        return SpecCandidate(value=spec, source=self.name, path=str(path))


class GlobalMarkerSource(SpecSource):
    """The ``.node-version`` directly under the installation root."""

    name = "global .node-version"

    def find(self, ctx: ResolutionContext) -> Optional[SpecCandidate]:
        path = ctx.config.global_marker
        try:
            spec = read_marker_file(path)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise SpecResolutionError(f"Couldn't read {path}: {e}") from e
        return SpecCandidate(value=spec, source=self.name, path=str(path))


def default_sources() -> List[SpecSource]:
    return [
        EnvOverrideSource(Constants.ENV_NODE_VERSION, "node_version"),
        EnvOverrideSource(Constants.ENV_NODIST_VERSION, "nodist_version"),
        ManifestSource(),
        LocalMarkerSource(),
        GlobalMarkerSource(),
    ]


class SpecResolver:
    """Runs the sources in order and parses the winning value."""

    def __init__(self, config: ShimConfig, sources: Optional[List[SpecSource]] = None):
        self.config = config
        self.sources = default_sources() if sources is None else sources

    def decide(self, args: Sequence[str], cwd: Optional[str] = None) -> SpecCandidate:
        """Return the first candidate whose normalized value is non-empty.

        Raises:
            SpecUndecidedError: If no source produced anything.
            SpecResolutionError: If a file lookup hit a real I/O error.
        """
        ctx = ResolutionContext(
            config=self.config,
            search_dir=search_dir_for(args, os.getcwd() if cwd is None else cwd),
        )
        logger.debug("searching for a version spec from %s", ctx.search_dir)

        for source in self.sources:
            candidate = source.find(ctx)
            if candidate is None:
                logger.debug("%s: nothing found", source.name)
                continue
            if not normalize_spec(candidate.value):
                logger.debug("%s: empty spec in %s", source.name, candidate.describe())
                continue
            logger.debug("%s found: '%s'", candidate.describe(), candidate.value)
            return candidate

        raise SpecUndecidedError(
            "Couldn't decide which node version to use. Please set a version."
        )

    def resolve(self, args: Sequence[str], cwd: Optional[str] = None) -> VersionSpec:
        """Decide on a spec and parse it; see ``parse_version_spec``."""
        candidate = self.decide(args, cwd)
        return parse_version_spec(candidate.value)
