import os
import threading
from threading import Thread
from time import sleep

import pytest

from .registry import HANDLE_REGISTRY


def pytest_sessionstart(session):
    """End the run if the suite hangs past its timeout."""
    timeout = float(session.config.getini("timeout")) + 5
    Thread(target=lambda: sleep(timeout) or os._exit(1), daemon=True).start()


@pytest.fixture(autouse=True)
def check_thread_cleanup():
    """Fail tests that leave threads running."""
    initial_threads = set(threading.enumerate())
    yield
    final_threads = {t for t in threading.enumerate() if t.is_alive()}
    new_threads = final_threads - initial_threads

    if new_threads:
        names = ", ".join(sorted(thread.name for thread in new_threads))
        pytest.fail(f"Test left {len(new_threads)} thread(s) running: {names}")


@pytest.fixture
def registry():
    """Isolate changes to the handle registry."""
    original = dict(HANDLE_REGISTRY)
    try:
        yield HANDLE_REGISTRY
    finally:
        HANDLE_REGISTRY.clear()
        HANDLE_REGISTRY.update(original)
