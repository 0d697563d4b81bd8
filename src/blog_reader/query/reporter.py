"""Propagates query result counts to registered listeners."""

import logging
from collections.abc import Callable

from blog_reader.data import QueryResult

logger = logging.getLogger(__name__)

ResultListener = Callable[[QueryResult], None]


class ResultReporter:
    """Delivers each fresh query result to every subscribed listener.

    Reports are stamped with a generation number that increases with every
    input change. A report whose generation is older than one already
    delivered is dropped, so listeners never see results out of order.
    """

    def __init__(self) -> None:
        self._listeners: list[ResultListener] = []
        self._last_generation = -1
        self._last_result: QueryResult | None = None

    @property
    def last_result(self) -> QueryResult | None:
        return self._last_result

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def report(self, result: QueryResult, *, generation: int) -> bool:
        """Deliver ``result`` unless a newer generation was already reported.

        A listener that raises is logged and skipped; the remaining listeners
        still receive the result.

        Returns:
            True if the result was delivered.
        """
        if generation < self._last_generation:
            logger.debug(
                "Dropping stale result (generation %d < %d)", generation, self._last_generation
            )
            return False
        self._last_generation = generation
        self._last_result = result
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                logger.warning("Result listener %r failed", listener, exc_info=True)
        return True
