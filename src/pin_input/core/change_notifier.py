"""
Change notification for buffers and controllers.

A minimal observer list: listeners are called synchronously, in subscription
order, on the thread that triggers the change.
"""
from typing import Any, Callable, List

from pin_input.core.errors import StateInconsistencyError
from pin_input.utils.logger import logger


class ChangeNotifier:
    """
    Holds a list of listeners and notifies them on demand.

    Implements the Observer pattern for the single-threaded UI loop.
    Once disposed, the notifier rejects any further use.
    """

    def __init__(self):
        """Initialize the listener list."""
        self._listeners: List[Callable[..., Any]] = []
        self._disposed = False

    def _check_not_disposed(self) -> None:
        if self._disposed:
            raise StateInconsistencyError(
                f"{type(self).__name__} was used after being disposed"
            )

    def add_listener(self, callback: Callable[..., Any]) -> None:
        """
        Subscribe to change notifications.

        Args:
            callback: Function to call on every change
        """
        self._check_not_disposed()
        if callback not in self._listeners:
            self._listeners.append(callback)
            logger.debug(f"{type(self).__name__}: listener added ({len(self._listeners)} total)")

    def remove_listener(self, callback: Callable[..., Any]) -> None:
        """
        Unsubscribe from change notifications.

        Removing a listener that is not subscribed is a no-op, so a disposed
        notifier still accepts it.

        Args:
            callback: The callback to remove
        """
        if callback in self._listeners:
            self._listeners.remove(callback)
            logger.debug(f"{type(self).__name__}: listener removed ({len(self._listeners)} left)")

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def notify_listeners(self, *args: Any) -> None:
        """
        Call every listener with the given arguments.

        A listener raising an exception is logged and does not prevent the
        remaining listeners from running.
        """
        self._check_not_disposed()
        # Listeners may (un)subscribe while being notified
        listeners = self._listeners.copy()

        for callback in listeners:
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Error in {type(self).__name__} listener {callback!r}: {e}")

    def dispose(self) -> None:
        """Drop all listeners and mark the notifier unusable."""
        self._check_not_disposed()
        self._listeners.clear()
        self._disposed = True
        logger.debug(f"{type(self).__name__} disposed")
