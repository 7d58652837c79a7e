"""Shared fixtures: a throwaway nodist installation and a clean environment."""

import logging
import os
import stat
from pathlib import Path

import pytest

from nodist_shim.config import ShimConfig
from nodist_shim.resolution import resolver, walker

SHIM_ENV_VARS = ("NODIST_PREFIX", "NODE_VERSION", "NODIST_VERSION", "NODIST_X64",
                 "NODIST_LOG_LEVEL", "DEBUG")

posix_only = pytest.mark.skipif(os.name == "nt", reason="needs POSIX sh and signals")


def make_fake_node(path, body="exit 0"):
    """Write an executable shell script standing in for a node binary."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SHIM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """configure_logging() binds a handler to the current stderr; undo it."""
    pkg_logger = logging.getLogger("nodist_shim")
    handlers, level = list(pkg_logger.handlers), pkg_logger.level
    yield
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)


@pytest.fixture(autouse=True)
def walk_stays_in_tmp(tmp_path, monkeypatch):
    """Keep upward walks from seeing real files above the test directory."""
    def bounded(start, filename, reader):
        def guarded(candidate):
            if tmp_path not in Path(candidate).parents:
                raise FileNotFoundError(candidate)
            return reader(candidate)
        return walker.find_upward(start, filename, guarded)

    monkeypatch.setattr(resolver, "find_upward", bounded)


@pytest.fixture
def prefix(tmp_path):
    """An installation root with an empty 32-bit and 64-bit tree."""
    root = tmp_path / "nodist"
    (root / "v").mkdir(parents=True)
    (root / "v-x64").mkdir()
    return root


@pytest.fixture
def install(prefix):
    """Create installed version directories: ``install("10.2.0", x64=True)``."""
    def _install(*names, x64=False):
        tree = prefix / ("v-x64" if x64 else "v")
        for name in names:
            (tree / name).mkdir(parents=True, exist_ok=True)
        return tree
    return _install


@pytest.fixture
def config(prefix):
    return ShimConfig(prefix=prefix)


@pytest.fixture
def project(tmp_path):
    """A nested project directory, far from the installation root."""
    path = tmp_path / "work" / "app" / "lib"
    path.mkdir(parents=True)
    return path
