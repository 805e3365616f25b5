"""Completion signals for asynchronous step actions.

Most step actions finish synchronously. Actions that must wait for an
external event (a network callback, a notification delivery, the end of
a screen transition) return a `Completion` instead, and the step blocks
on it within its timeout.
"""

from threading import Event, Lock
from time import monotonic
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class Completion:
    """One-shot completion signal.

    The signal is resolved or rejected exactly once, usually from a
    callback that may fire on another thread. Subsequent calls are
    ignored, so the first terminal report wins.
    """

    def __init__(self) -> None:
        """Initialize a pending completion."""
        self._event = Event()
        self._lock = Lock()
        self._error: Exception | None = None

    @property
    def done(self) -> bool:
        """Whether the completion was resolved or rejected."""
        return self._event.is_set()

    @property
    def error(self) -> Exception | None:
        """The rejection error, if the completion was rejected."""
        return self._error

    def resolve(self) -> None:
        """Report a successful completion."""
        with self._lock:
            if not self._event.is_set():
                self._event.set()

    def reject(self, error: Exception | str) -> None:
        """Report a failed completion.

        Args:
            error: Exception or message describing the failure.
        """
        if isinstance(error, str):
            error = RuntimeError(error)

        with self._lock:
            if not self._event.is_set():
                self._error = error
                self._event.set()

    def wait(self, timeout: float, *,
             poll_interval: float = 0.01,
             pump: 'Callable[[], None] | None' = None) -> bool:
        """Wait until the completion is reported or the timeout elapses.

        Args:
            timeout: Maximum number of seconds to wait.
            poll_interval: Number of seconds between two checks.
            pump: Optional hook invoked on every check, used to drive
                an event loop that delivers the awaited callback.

        Returns:
            `True` if the completion was reported in time, else `False`.
        """
        deadline = monotonic() + timeout

        while not self._event.is_set():
            remaining = deadline - monotonic()
            if remaining <= 0:
                return False
            if pump is not None:
                pump()
            self._event.wait(min(poll_interval, remaining))

        return True
