"""Extracting the ``engines.node`` declaration from ``package.json``."""

from __future__ import annotations

import json
import logging
from pathlib import PurePath

logger = logging.getLogger(__name__)


def engine_spec_from_manifest(raw: bytes, source: str = "package.json") -> str:
    """Return ``engines.node`` from raw manifest content, or "" if unusable.

    Broken JSON is logged and yields "" rather than raising: once a manifest
    has been found the lookup commits to it.
    """
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unparsable %s: %s", source, e)
        return ""

    if not isinstance(data, dict):
        logger.debug("%s is not a JSON object", source)
        return ""

    engines = data.get("engines")
    if not isinstance(engines, dict):
        logger.debug("%s declares no engines", source)
        return ""

    node = engines.get("node")
    if node is None:
        return ""
    if not isinstance(node, str):
        logger.warning("Ignoring non-string engines.node in %s: %r", source, node)
        return ""
    return node


def read_manifest_engine(path: PurePath) -> str:
    """Read a manifest from disk and extract its engine spec."""
    with open(path, "rb") as f:
        raw = f.read()
    return engine_spec_from_manifest(raw, str(path))
