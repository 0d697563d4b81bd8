"""Trailing-edge debouncing on an asyncio event loop."""

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Search input debounce delay in milliseconds
DEFAULT_DEBOUNCE_MS = 300


class Debouncer(Generic[T]):
    """Coalesce rapid calls into one trailing invocation of ``action``.

    Each call cancels whatever is pending and restarts the timer, so after a
    burst of calls only the last value is applied, exactly once, ``delay_ms``
    after the last call. At most one invocation is pending at any time.

    A non-positive delay disables coalescing: every call runs ``action``
    immediately and synchronously.

    The owner must call ``cancel()`` (or use the debouncer as a context
    manager) on teardown; a pending invocation is otherwise still delivered.

    Args:
        action: Single-argument callable receiving the settled value.
        delay_ms: Quiet period in milliseconds.
        loop: Event loop to schedule on (defaults to the running loop at
            call time).
    """

    def __init__(
        self,
        action: Callable[[T], object],
        delay_ms: float = DEFAULT_DEBOUNCE_MS,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._action = action
        self._delay = delay_ms / 1000
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._pending_value: T | None = None

    @property
    def delay_ms(self) -> float:
        return self._delay * 1000

    @property
    def pending(self) -> bool:
        """Whether an invocation is scheduled and not yet run."""
        return self._handle is not None

    def schedule(self, value: T) -> None:
        """Schedule ``action(value)``, superseding any pending invocation."""
        if self._delay <= 0:
            self._action(value)
            return

        loop = self._loop or asyncio.get_running_loop()
        # Swap out the old handle before cancelling it
        old_handle = self._handle
        self._handle = None
        if old_handle is not None:
            old_handle.cancel()
        self._pending_value = value
        self._handle = loop.call_later(self._delay, self._fire)

    def __call__(self, value: T) -> None:
        self.schedule(value)

    def cancel(self) -> bool:
        """Drop the pending invocation, if any.

        Returns:
            True if an invocation was pending.
        """
        handle = self._handle
        self._handle = None
        self._pending_value = None
        if handle is None:
            return False
        handle.cancel()
        return True

    def flush(self) -> bool:
        """Run the pending invocation now instead of waiting for the timer.

        Returns:
            True if an invocation was pending and has been run.
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def _fire(self) -> None:
        value = self._pending_value
        self._handle = None
        self._pending_value = None
        logger.debug("Debounce window elapsed, applying %r", value)
        self._action(value)  # type: ignore[arg-type]

    def __enter__(self) -> "Debouncer[T]":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cancel()
