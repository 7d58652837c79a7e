"""Version spec discovery: environment, manifest, marker files."""

from .resolver import SpecResolver, default_sources, normalize_spec

__all__ = ["SpecResolver", "default_sources", "normalize_spec"]
