"""Signal handling for the ignoretree CLI.

Tree output is often piped into pagers or ``head``. Each handled signal is
recorded once, its previous handler is put back, and the writer checks the
record between lines so output stops at a line boundary.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# Exit status reported for each handled signal, by convention 128 + signal number
EXIT_CODES: Dict[signal.Signals, int] = {
    signal.SIGPIPE: 141,
    signal.SIGINT: 130,
}


class SignalHandler:
    """Records which of the handled signals have arrived.

    Attributes:
        received: One event per handled signal, set when that signal arrives.
        original_handlers: Handlers that were installed before ours.
    """

    def __init__(self) -> None:
        self.received: Dict[signal.Signals, Event] = {signum: Event() for signum in EXIT_CODES}
        self.original_handlers: Dict[signal.Signals, Any] = {
            signum: signal.getsignal(signum) for signum in EXIT_CODES
        }

    @property
    def sigpipe_received(self) -> Event:
        return self.received[signal.SIGPIPE]

    @property
    def sigint_received(self) -> Event:
        return self.received[signal.SIGINT]

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record a signal and restore the handler it replaced.

        A second delivery of the same signal therefore gets the default behaviour,
        e.g. a second Ctrl+C raises KeyboardInterrupt.
        """
        sig = signal.Signals(signum)
        self.received[sig].set()
        signal.signal(sig, self.original_handlers[sig])

    def install(self) -> None:
        for signum in EXIT_CODES:
            signal.signal(signum, self.handle)

    def interrupted(self) -> bool:
        """Check whether any handled signal has been received."""
        return any(event.is_set() for event in self.received.values())

    def exit_code(self) -> Optional[int]:
        """Exit code for the received signal, or None if no signal arrived.

        SIGPIPE wins over SIGINT: once the reader is gone nothing else matters.
        """
        for signum, code in EXIT_CODES.items():
            if self.received[signum].is_set():
                return code
        return None

    def reset(self) -> None:
        for event in self.received.values():
            event.clear()


# Shared by the writer and the entry point
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers."""
    signal_handler.install()


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Flushing buffered output at shutdown would otherwise raise a second
    broken-pipe error.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
