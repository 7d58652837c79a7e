"""Process-wide configuration, read once from the environment.

Every other component receives a ``ShimConfig``; nothing else looks at
``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .constants import Constants
from .errors import ConfigurationError


@dataclass(frozen=True)
class ShimConfig:
    """Immutable settings for one shim invocation."""

    prefix: Path
    x64: bool = False
    node_version: Optional[str] = None
    nodist_version: Optional[str] = None
    node_binary: str = Constants.NODE_BINARY
    log_level: str = Constants.DEFAULT_LOG_LEVEL
    debug_patterns: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShimConfig":
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``.

        Raises:
            ConfigurationError: If the installation root is not set.
        """
        env = os.environ if environ is None else environ

        prefix = env.get(Constants.ENV_PREFIX, "")
        if not prefix:
            raise ConfigurationError(
                "Please set the path to the nodist directory in the "
                f"{Constants.ENV_PREFIX} environment variable."
            )

        return cls(
            prefix=Path(prefix),
            x64=env.get(Constants.ENV_X64, "") == "1",
            node_version=env.get(Constants.ENV_NODE_VERSION) or None,
            nodist_version=env.get(Constants.ENV_NODIST_VERSION) or None,
            log_level=(env.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper(),
            debug_patterns=env.get(Constants.ENV_DEBUG, ""),
        )

    @property
    def versions_root(self) -> Path:
        """Directory holding one subdirectory per installed version."""
        name = Constants.VERSIONS_DIR_X64 if self.x64 else Constants.VERSIONS_DIR
        return self.prefix / name

    @property
    def global_marker(self) -> Path:
        return self.prefix / Constants.NODE_VERSION_FILE

    def binary_path(self, version_dir: str) -> Path:
        """Absolute path of the node executable for an installed version."""
        return self.versions_root / version_dir / self.node_binary
