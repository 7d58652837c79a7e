"""Enumerating installed versions under the installation root."""

from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional

from ..config import ShimConfig
from ..errors import CatalogError
from .models import InstalledVersion
from .parser import parse_installed_name

logger = logging.getLogger(__name__)

SkipSink = Callable[[str], None]


def _log_skipped(name: str) -> None:
    logger.debug("Skipping %r: not a semantic version", name)


def list_installed_versions(config: ShimConfig,
                            on_skip: Optional[SkipSink] = None) -> List[InstalledVersion]:
    """Return installed versions for the configured architecture, newest first.

    Subdirectories whose names are not semantic versions are dropped and
    reported to ``on_skip``. Plain files are ignored.

    Raises:
        CatalogError: If the versions directory cannot be listed.
    """
    sink = on_skip or _log_skipped
    root = config.versions_root

    try:
        entries = list(os.scandir(root))
    except OSError as e:
        raise CatalogError(f"Couldn't list installed versions in {root}: {e}") from e

    installed: List[InstalledVersion] = []
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        if not is_dir:
            continue
        version = parse_installed_name(entry.name)
        if version is None:
            sink(entry.name)
            continue
        installed.append(InstalledVersion(version=version, directory=entry.name))

    installed.sort(reverse=True)
    logger.debug("installed in %s: %s", root, ", ".join(str(v) for v in installed) or "none")
    return installed
