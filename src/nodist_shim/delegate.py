"""Running the selected node binary in place of the shim.

The child inherits stdin, stdout and stderr. Its outcome is reported as a
``ChildOutcome`` and then reproduced on the shim's own process by
``exit_like``.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .errors import DelegationError

logger = logging.getLogger(__name__)

# Signals the shim passes on to the child while waiting for it.
FORWARDED_SIGNALS = [
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP", "SIGQUIT") if hasattr(signal, name)
]


@dataclass(frozen=True)
class ChildOutcome:
    """How the child ended: ``exit_code`` or ``signal_number``, never both."""
    exit_code: Optional[int] = None
    signal_number: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ChildOutcome":
        # subprocess reports death by signal N as -N on POSIX
        if returncode < 0:
            return cls(signal_number=-returncode)
        return cls(exit_code=returncode)

    @property
    def signaled(self) -> bool:
        return self.signal_number is not None

    def fallback_code(self) -> int:
        """Exit code to use when re-raising the signal is not possible."""
        if self.signaled:
            return 128 + self.signal_number
        return self.exit_code


def _stdin_is_terminal() -> bool:
    try:
        return os.isatty(0)
    except OSError:
        return False


class _SignalForwarder:
    """Pass termination signals to the child for the duration of a ``with``."""

    def __init__(self, proc: subprocess.Popen):
        self.proc = proc
        self._saved: Dict[int, object] = {}

    def _forward(self, signum, _frame) -> None:
        logger.debug("forwarding signal %d to pid %d", signum, self.proc.pid)
        try:
            self.proc.send_signal(signum)
        except OSError:
            pass  # child already gone

    def __enter__(self) -> "_SignalForwarder":
        for signum in FORWARDED_SIGNALS:
            self._saved[signum] = signal.signal(signum, self._forward)
        # A terminal sends ^C to the whole process group, so the child already
        # has it; anyone else only signals the shim and needs it passed on.
        sigint = signal.SIG_IGN if _stdin_is_terminal() else self._forward
        self._saved[signal.SIGINT] = signal.signal(signal.SIGINT, sigint)
        return self

    def __exit__(self, *exc) -> None:
        for signum, handler in self._saved.items():
            signal.signal(signum, handler)
        self._saved.clear()


def run_binary(binary: Path, args: Sequence[str]) -> ChildOutcome:
    """Launch ``binary`` with ``args`` and block until it ends.

    Raises:
        DelegationError: If the process could not be started at all.
    """
    cmd: List[str] = [str(binary), *args]
    logger.debug("running %s", cmd)

    # Anything the shim printed must come out before the child's output.
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        proc = subprocess.Popen(cmd)  # noqa: S603
    except OSError as e:
        raise DelegationError(f"Couldn't run {binary}: {e}") from e

    with _SignalForwarder(proc):
        returncode = proc.wait()

    outcome = ChildOutcome.from_returncode(returncode)
    logger.debug("child ended: %s", outcome)
    return outcome


def exit_like(outcome: ChildOutcome) -> None:
    """Terminate the shim the same way the child terminated. Does not return."""
    if outcome.signaled:
        sys.stdout.flush()
        sys.stderr.flush()
        signum = outcome.signal_number
        try:
            signal.signal(signum, signal.SIG_DFL)
        except (OSError, ValueError):
            pass  # SIGKILL and SIGSTOP cannot be caught, so they are default already
        try:
            os.kill(os.getpid(), signum)
        except OSError as e:
            logger.debug("couldn't re-raise signal %d on the shim: %s", signum, e)
    sys.exit(outcome.fallback_code())
