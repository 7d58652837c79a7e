"""Tests for logging configuration."""

import io
import logging

import pytest

from nodist_shim.common.logging_utils import configure_logging, debug_namespace_enabled, resolve_level


class TestDebugNamespace:
    """DEBUG=... patterns in the style of the debug module."""

    @pytest.mark.parametrize("patterns,expected", [
        ("nodist:shim", True),
        ("nodist:*", True),
        ("*", True),
        ("express:*,nodist:shim", True),
        ("express:* nodist:*", True),
        ("express:*", False),
        ("*,-nodist:shim", False),
        ("", False),
    ])
    def test_patterns(self, patterns, expected):
        assert debug_namespace_enabled(patterns) is expected


class TestResolveLevel:
    def test_named_level(self):
        assert resolve_level("info") == logging.INFO

    def test_unknown_level_falls_back_to_warning(self):
        assert resolve_level("chatty") == logging.WARNING

    def test_debug_namespace_forces_debug(self):
        assert resolve_level("ERROR", "nodist:*") == logging.DEBUG


class TestConfigureLogging:
    def test_writes_to_given_stream(self):
        stream = io.StringIO()
        configure_logging("DEBUG", stream=stream)
        logging.getLogger("nodist_shim.test").debug("hello %s", "there")
        assert "[DEBUG] nodist_shim.test: hello there" in stream.getvalue()

    def test_reconfiguring_does_not_stack_handlers(self):
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())
        names = [h.get_name() for h in logging.getLogger("nodist_shim").handlers]
        assert names.count("nodist-shim") == 1

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        logging.getLogger("nodist_shim.test").info("quiet")
        assert stream.getvalue() == ""
