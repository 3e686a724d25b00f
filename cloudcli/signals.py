"""Blocking until the process is asked to terminate."""

from __future__ import annotations

import signal
import threading
from typing import Callable

_POLL_INTERVAL = 0.05


def _termination_signals() -> list[signal.Signals]:
    names = ("SIGTERM", "SIGQUIT", "SIGINT")
    return [getattr(signal, name) for name in names if hasattr(signal, name)]


def wait_for_signal(callback: Callable[[], object]) -> None:
    """Block until SIGTERM, SIGQUIT or SIGINT arrives, then call ``callback``.

    Must be called from the main thread; previous handlers are restored.
    """
    arrived = threading.Event()

    def _handler(signum, frame):
        arrived.set()

    previous = {}
    try:
        for sig in _termination_signals():
            previous[sig] = signal.signal(sig, _handler)
        while not arrived.wait(_POLL_INTERVAL):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    callback()