"""Execution-context helpers attached to every log event"""

import asyncio
import threading
import time

_START = time.monotonic()


def get_thread_id() -> int:
    """Identifier of the calling thread."""
    return threading.get_ident()


def get_thread_name() -> str:
    """Name of the calling thread."""
    return threading.current_thread().name


def get_fiber_id() -> int:
    """
    Identifier of the running asyncio task.

    Returns 0 when called outside of a task.
    """
    try:
        task = asyncio.current_task()
    except RuntimeError:
        return 0
    return id(task) if task is not None else 0


def get_elapsed_ms() -> int:
    """Milliseconds since the package was imported."""
    return int((time.monotonic() - _START) * 1000)
