"""nodist shim entry point.

Installed as the ``node`` executable seen by users: decides which installed
node version the current project wants and runs it with the same arguments.
All of the shim's own failures exit with a code from ``ExitCodes``; otherwise
the exit status is the child's.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Mapping, Optional

from .common.logging_utils import configure_logging
from .config import ShimConfig
from .delegate import ChildOutcome, exit_like, run_binary
from .errors import ShimError
from .resolution.resolver import SpecResolver
from .versioning.catalog import list_installed_versions
from .versioning.matcher import pick_version

logger = logging.getLogger(__name__)


def delegate(config: ShimConfig, args: List[str], cwd: Optional[str] = None) -> ChildOutcome:
    """Resolve, match and run; raises ``ShimError`` on any shim failure."""
    spec = SpecResolver(config).resolve(args, cwd)

    installed = list_installed_versions(config)
    selected = pick_version(spec, installed)
    logger.debug("found matching version: %s", selected)

    binary = config.binary_path(selected.directory)
    return run_binary(binary, args)


def run(argv: Optional[List[str]] = None,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[str] = None) -> ChildOutcome:
    """Like ``main`` but returns the outcome; ``ShimError`` still propagates."""
    args = sys.argv[1:] if argv is None else list(argv)
    config = ShimConfig.from_env(environ)
    configure_logging(config.log_level, config.debug_patterns)
    return delegate(config, args, cwd)


def main(argv: Optional[List[str]] = None) -> None:
    """Console entry point. Does not return."""
    try:
        outcome = run(argv)
    except ShimError as e:
        logger.debug("aborting: %s", e, exc_info=True)
        sys.stderr.write(e.user_message() + "\n")
        sys.exit(e.exit_code.value)
    exit_like(outcome)


if __name__ == "__main__":
    main()
