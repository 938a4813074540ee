"""Reset signal raised after the stored credential changes.

Session and cache owners subscribe to the bus and drop whatever they
built from the previous credential.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List

logger = logging.getLogger("chat_auth.events")


@dataclass(frozen=True)
class ResetEvent:
    """Emitted once per successful credential mutation."""
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)


ResetListener = Callable[[ResetEvent], None]


class SignalBus:
    """Fans a ResetEvent out to every subscribed listener."""

    def __init__(self):
        self._listeners: List[ResetListener] = []

    def subscribe(self, listener: ResetListener) -> Callable[[], None]:
        """
        Register a listener.

        Args:
            listener: Called with each emitted event

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: ResetEvent) -> None:
        """
        Deliver the event to listeners in subscription order.

        A listener that raises is logged and skipped; the rest still
        receive the event.
        """
        logger.debug(
            f"Emitting reset ({event.reason}) to {len(self._listeners)} listener(s)"
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # Remaining listeners must still see the reset
                logger.exception(f"Reset listener {listener!r} failed")
