import os
import signal
import threading
import time

import pytest

from cloudcli.signals import wait_for_signal


def _send_when_handled(sig, original):
    deadline = time.monotonic() + 5
    while signal.getsignal(sig) is original and time.monotonic() < deadline:
        time.sleep(0.01)
    os.kill(os.getpid(), sig)


@pytest.mark.parametrize("sig", [signal.SIGTERM, signal.SIGINT])
def test_callback_runs_after_signal(sig):
    original = signal.getsignal(sig)
    calls = []
    sender = threading.Thread(target=_send_when_handled, args=(sig, original))
    sender.start()
    wait_for_signal(lambda: calls.append("called"))
    sender.join()
    assert calls == ["called"]


def test_previous_handlers_restored():
    original_term = signal.getsignal(signal.SIGTERM)
    original_int = signal.getsignal(signal.SIGINT)
    calls = []
    sender = threading.Thread(
        target=_send_when_handled, args=(signal.SIGTERM, original_term)
    )
    sender.start()
    wait_for_signal(lambda: calls.append("stopped"))
    sender.join()
    assert calls == ["stopped"]
    assert signal.getsignal(signal.SIGTERM) is original_term
    assert signal.getsignal(signal.SIGINT) is original_int


def test_callback_error_propagates():
    original = signal.getsignal(signal.SIGTERM)
    sender = threading.Thread(
        target=_send_when_handled, args=(signal.SIGTERM, original)
    )
    sender.start()

    def failing():
        raise RuntimeError("shutdown failed")

    with pytest.raises(RuntimeError, match="shutdown failed"):
        wait_for_signal(failing)
    sender.join()
    assert signal.getsignal(signal.SIGTERM) is original