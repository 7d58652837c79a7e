"""Failures that end a shim invocation before (or instead of) delegation."""

from .constants import ExitCodes


class ShimError(Exception):
    """Base class; ``exit_code`` is what the shim process exits with."""

    exit_code = ExitCodes.SPEC_UNDECIDED
    summary = "Sorry, there's a problem with nodist."

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def user_message(self) -> str:
        return f"{self.summary} {self.message}".strip()


class ConfigurationError(ShimError):
    exit_code = ExitCodes.CONFIG_MISSING
    summary = ""


class SpecUndecidedError(ShimError):
    exit_code = ExitCodes.SPEC_UNDECIDED


class SpecResolutionError(ShimError):
    """An I/O failure other than "not found" while looking for a spec."""

    exit_code = ExitCodes.SPEC_UNDECIDED


class MalformedSpecError(ShimError):
    exit_code = ExitCodes.SPEC_MALFORMED


class CatalogError(ShimError):
    exit_code = ExitCodes.CATALOG_UNREADABLE


class NoMatchError(ShimError):
    exit_code = ExitCodes.NO_MATCH


class DelegationError(ShimError):
    exit_code = ExitCodes.DELEGATION_FAILED
