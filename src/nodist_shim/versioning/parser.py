"""Spec normalization and parsing."""

from __future__ import annotations

from typing import Optional

import semantic_version

from ..constants import Constants
from ..errors import MalformedSpecError, SpecUndecidedError
from .models import ResolutionMode, VersionSpec


def normalize_spec(raw: str) -> str:
    """Strip surrounding whitespace and one leading ``v``.

    ``"  v1.2.3 \\n"`` becomes ``"1.2.3"``.
    """
    s = raw.strip()
    if s.startswith("v"):
        s = s[1:].strip()
    return s


def parse_version_spec(raw: str) -> VersionSpec:
    """Turn a raw spec string into a VersionSpec.

    Raises:
        SpecUndecidedError: If nothing is left after normalization.
        MalformedSpecError: If it is neither ``latest`` nor a valid npm range.
    """
    spec = normalize_spec(raw)
    if not spec:
        raise SpecUndecidedError(
            "Couldn't decide which node version to use. Please set a version."
        )

    if spec == Constants.LATEST:
        return VersionSpec(raw=spec, mode=ResolutionMode.LATEST)

    try:
        constraint = semantic_version.NpmSpec(spec)
    except ValueError as e:
        raise MalformedSpecError(
            "Couldn't decide which node version to use. "
            f"Malformatted version spec '{spec}'. Please set a new version."
        ) from e
    return VersionSpec(raw=spec, mode=ResolutionMode.RANGE, constraint=constraint)


def parse_installed_name(name: str) -> Optional[semantic_version.Version]:
    """Parse an installed version directory name; None if it isn't one."""
    candidate = name[1:] if name.startswith("v") else name
    try:
        return semantic_version.Version(candidate)
    except ValueError:
        return None
