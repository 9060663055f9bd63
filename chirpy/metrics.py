"""
Visit counter for the /app/ file server.

One HitCounter is created per application in create_app() and stored in
app.extensions["hit_counter"]; handlers reach it through hit_counter().
"""
from __future__ import annotations

import threading

from flask import current_app

EXTENSION_KEY = "hit_counter"


class HitCounter:
    """Thread-safe monotonically increasing counter (until reset)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


def init_app(app) -> HitCounter:
    counter = HitCounter()
    app.extensions[EXTENSION_KEY] = counter
    return counter


def hit_counter() -> HitCounter:
    return current_app.extensions[EXTENSION_KEY]
