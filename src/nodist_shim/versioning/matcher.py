"""Selecting an installed version for a spec."""

from __future__ import annotations

import logging
from typing import Sequence

from ..errors import NoMatchError
from .models import InstalledVersion, ResolutionMode, VersionSpec

logger = logging.getLogger(__name__)


def pick_version(spec: VersionSpec, installed: Sequence[InstalledVersion]) -> InstalledVersion:
    """Pick from a newest-first catalog.

    ``latest`` takes the first entry; a range takes the first entry it
    matches, which is therefore the highest match.

    Raises:
        NoMatchError: If the catalog is empty or nothing satisfies the range.
    """
    if spec.mode == ResolutionMode.LATEST:
        if installed:
            return installed[0]
    else:
        for candidate in installed:
            logger.debug("checking %s against %s", candidate, spec)
            if spec.constraint.match(candidate.version):
                return candidate

    raise NoMatchError(
        f"Couldn't find an installed version that matches version spec '{spec}'."
    )
