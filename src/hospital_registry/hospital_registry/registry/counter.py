from __future__ import annotations

import threading
from typing import ClassVar, Optional


class StaffCounter:
    """Running total of staff ever added. Never decremented."""

    _process_wide: ClassVar[Optional["StaffCounter"]] = None

    def __init__(self):
        self._value = 0
        self._lock = threading.Lock()

    @classmethod
    def process_wide(cls) -> "StaffCounter":
        if cls._process_wide is None:
            cls._process_wide = cls()
        return cls._process_wide

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
