"""Logging setup for the shim.

Diagnostics always go to stderr so that the delegated process owns stdout.
"""

from __future__ import annotations

import fnmatch
import logging
import sys
from typing import Optional

from ..constants import Constants

_HANDLER_NAME = "nodist-shim"


def debug_namespace_enabled(patterns: str, namespace: str = Constants.DEBUG_NAMESPACE) -> bool:
    """Return True if a ``DEBUG``-style pattern list enables ``namespace``.

    Patterns are separated by commas or whitespace, ``*`` is a wildcard and a
    leading ``-`` excludes, matching the conventions of the ``debug`` module
    the nodist tooling uses.
    """
    enabled = False
    for pattern in patterns.replace(",", " ").split():
        if pattern.startswith("-"):
            if fnmatch.fnmatchcase(namespace, pattern[1:]):
                return False
            continue
        if fnmatch.fnmatchcase(namespace, pattern):
            enabled = True
    return enabled


def resolve_level(level_name: str, debug_patterns: str = "") -> int:
    """Map the configured level name to a ``logging`` level."""
    if debug_namespace_enabled(debug_patterns):
        return logging.DEBUG
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level_name: str = Constants.DEFAULT_LOG_LEVEL,
                      debug_patterns: str = "",
                      stream: Optional[object] = None) -> None:
    """Install the shim's stderr handler on the package logger.

    Calling it again replaces the previous handler rather than stacking.
    """
    pkg_logger = logging.getLogger("nodist_shim")
    for handler in list(pkg_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(resolve_level(level_name, debug_patterns))
