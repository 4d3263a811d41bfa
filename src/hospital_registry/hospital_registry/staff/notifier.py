from __future__ import annotations

from typing import Callable

from ..common.logging_utils import get_logger

logger = get_logger("staff")

StatusChangeHandler = Callable[[str, str], None]


class StatusChangeNotifier:
    """Observer list for duty-status changes.

    Handlers run synchronously in subscription order. An exception raised by
    a handler propagates to the caller of ``notify`` and the remaining
    handlers are skipped.
    """

    def __init__(self):
        self._handlers: list[StatusChangeHandler] = []

    def subscribe(self, handler: StatusChangeHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: StatusChangeHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def notify(self, staff_name: str, new_status: str) -> None:
        # copy so a handler may (un)subscribe while we iterate
        for handler in list(self._handlers):
            handler(staff_name, new_status)

    def __len__(self) -> int:
        return len(self._handlers)


def log_status_change(staff_name: str, new_status: str) -> None:
    logger.info("[status change] %s is now %s", staff_name, new_status)
