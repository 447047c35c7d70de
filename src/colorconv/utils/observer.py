"""Observer list shared by anything that emits events."""

import logging
from threading import Lock
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Keeps a list of observers and calls a named method on each of them.

    The lock covers the list only; callbacks run on a snapshot taken under
    it, so a callback may register or unregister observers (itself included).
    A callback that raises is logged and skipped, the remaining observers are
    still called.

        observers = ObserverManager[ColorObserver](observer_type_name="color")
        observers.register(app)
        observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, state)
    """

    # Quoted: threading.Lock is a factory function before Python 3.13
    def __init__(self, lock: "Lock | None" = None, observer_type_name: str = "observer"):
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer. Registering the same object twice has no effect."""
        with self._lock:
            if observer in self._observers:
                logger.debug(f"{self._kind} observer already registered: {observer}")
                return
            self._observers.append(observer)
        logger.info(f"Registered {self._kind} observer: {observer}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"Cannot unregister unknown {self._kind} observer: {observer}")
                return
        logger.debug(f"Unregistered {self._kind} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call `observer.<callback_name>(*args, **kwargs)` on every observer, in registration order."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"{self._kind} observer {observer} failed in {callback_name}: {e}", exc_info=True)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._observers)
            self._observers.clear()
        if dropped:
            logger.info(f"Cleared {dropped} {self._kind} observer(s)")

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __bool__(self) -> bool:
        return len(self) > 0
