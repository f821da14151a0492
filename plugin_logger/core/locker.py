"""
Serialized invocation

A per-instance mutual-exclusion gate used by backends to keep writes to a
shared target (a file handle, a stream) from interleaving.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class InvokeResult:
    """Outcome of one gated action: success, or the captured error."""

    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        """True if the action completed without raising."""
        return self.error is None

    def unwrap(self) -> None:
        """Re-raise the captured error, if any."""
        if self.error is not None:
            raise self.error


class SerializedInvoker:
    """
    Run actions one at a time.

    Thread Safety:
        Two concurrent calls never run their actions at the same time; the
        second blocks until the first action and its cleanup are done.

    The gate is not reentrant. An action that calls back into
    ``locked_invoke`` on the same invoker deadlocks.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # Diagnostics only; never consulted for control flow.
        self.is_locked = False

    def invoke(self, action: Callable[[], None]) -> InvokeResult:
        """
        Run action under the gate and report the outcome.

        The lock is released and ``is_locked`` reset before this returns,
        whether or not the action raised.

        Args:
            action: Zero-argument callable

        Returns:
            InvokeResult carrying the captured error, if any

        Raises:
            ValueError: If action is None
            TypeError: If action is not callable
        """
        if action is None:
            raise ValueError("Required argument action.")
        if not callable(action):
            raise TypeError("action must be callable")

        result = InvokeResult()
        with self._lock:
            self.is_locked = True
            try:
                action()
            except Exception as e:
                result.error = e
            finally:
                self.is_locked = False
        return result

    def locked_invoke(self, action: Callable[[], None]) -> None:
        """
        Run action under the gate, then re-raise its error unchanged.

        Args:
            action: Zero-argument callable

        Raises:
            ValueError: If action is None
            TypeError: If action is not callable
            Exception: Whatever the action raised, after the lock is released
        """
        self.invoke(action).unwrap()
