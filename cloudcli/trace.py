"""Verbose dumping of HTTP traces collected while talking to the cloud."""

from __future__ import annotations

import queue
import threading
from typing import Any

from cloudcli import output

_POLL_INTERVAL = 0.1


def _text(data: Any) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode(errors="replace")
    return str(data)


def dump_trace(data: Any) -> None:
    """Print a trace: request, response and the events that happened between.

    ``data`` carries ``id``, ``request`` (``method``, ``url``), ``request_body``,
    ``response`` (``status_code``), ``response_body`` and ``events`` (each with
    ``happened_at`` and ``message``).
    """
    trace_id = data.id
    request = data.request
    output.verbose(f"[{trace_id}] Send a {request.method} request to {request.url}")
    if data.request_body:
        output.verbose(f"[{trace_id}] Send a request body: {_text(data.request_body)}")

    output.verbose(
        f"[{trace_id}] Receive a response with status: {data.response.status_code}"
    )
    if data.response_body:
        output.verbose(
            f"[{trace_id}] Receive a response body: {_text(data.response_body)}"
        )

    events = list(data.events or [])
    output.verbose(f"[{trace_id}] Dump {len(events)} events:")
    for index, event in enumerate(events):
        happened = event.happened_at.strftime("%Y-%m-%d %H:%M:%S")
        output.verbose(f"[{trace_id}] Event#{index} {happened} : {event.message}")


class TraceVerbose:
    """Consumes traces from queues until told to exit."""

    def __init__(self) -> None:
        self._stop = threading.Event()
        self._running = 0
        self._idle = threading.Condition()

    def run(self, trace_queue: queue.Queue) -> None:
        """Dump traces from the queue until exit; queued traces are drained first."""
        with self._idle:
            self._running += 1
        try:
            while not self._stop.is_set():
                try:
                    item = trace_queue.get(timeout=_POLL_INTERVAL)
                except queue.Empty:
                    continue
                dump_trace(item)
            while True:
                try:
                    item = trace_queue.get_nowait()
                except queue.Empty:
                    break
                dump_trace(item)
        finally:
            with self._idle:
                self._running -= 1
                self._idle.notify_all()

    def exit(self) -> None:
        """Ask every running consumer to stop."""
        self._stop.set()

    def wait(self) -> None:
        """Block until every running consumer has stopped."""
        with self._idle:
            self._idle.wait_for(lambda: self._running == 0)


TRACE_VERBOSE = TraceVerbose()