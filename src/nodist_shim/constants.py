"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the shim's own failures.

    Args:
        Enum (int): Exit codes for the program. Kept in the 40s so they
            stay apart from the codes node itself commonly returns.
    """

    CONFIG_MISSING = 40
    SPEC_UNDECIDED = 41
    DELEGATION_FAILED = 42
    SPEC_MALFORMED = 43
    CATALOG_UNREADABLE = 44
    NO_MATCH = 45


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    ENV_PREFIX = "NODIST_PREFIX"
    ENV_NODE_VERSION = "NODE_VERSION"
    ENV_NODIST_VERSION = "NODIST_VERSION"
    ENV_X64 = "NODIST_X64"
    ENV_LOG_LEVEL = "NODIST_LOG_LEVEL"
    ENV_DEBUG = "DEBUG"

    DEBUG_NAMESPACE = "nodist:shim"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

    PACKAGE_JSON_FILE = "package.json"
    NODE_VERSION_FILE = ".node-version"
    VERSIONS_DIR = "v"
    VERSIONS_DIR_X64 = "v-x64"
    NODE_BINARY = "node.exe" if os.name == "nt" else "node"

    LATEST = "latest"
