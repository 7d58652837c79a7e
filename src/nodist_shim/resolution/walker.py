"""Upward directory walking used to find project-local files."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Callable, Iterator, Optional, Tuple, TypeVar

from ..errors import SpecResolutionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DirectoryWalk:
    """Ancestors of ``start``, nearest first, ending at the root.

    Each step drops exactly one trailing segment. Iterating again starts over.
    Works on any ``PurePath`` flavor, so the host convention is whatever
    flavor ``start`` was built with.
    """

    def __init__(self, start: PurePath):
        self.start = start

    def __iter__(self) -> Iterator[PurePath]:
        parts = self.start.parts
        flavor = type(self.start)
        for end in range(len(parts), 0, -1):
            yield flavor(*parts[:end])

    def __repr__(self) -> str:
        return f"DirectoryWalk({str(self.start)!r})"


def find_upward(start: PurePath, filename: str,
                reader: Callable[[PurePath], T]) -> Optional[Tuple[PurePath, T]]:
    """Probe ``filename`` in ``start`` and each ancestor; stop at the first hit.

    Args:
        start: Absolute directory to start from.
        filename: File name to look for in each directory.
        reader: Called with the candidate path; ``FileNotFoundError`` means
            keep walking.

    Returns:
        ``(path, value)`` for the first file read, or None if none exists.

    Raises:
        SpecResolutionError: On any other I/O error; the walk stops there.
    """
    for directory in DirectoryWalk(start):
        candidate = directory / filename
        logger.debug("probing %s", candidate)
        try:
            return candidate, reader(candidate)
        except FileNotFoundError:
            continue
        except OSError as e:
            raise SpecResolutionError(f"Couldn't read {candidate}: {e}") from e
    return None
