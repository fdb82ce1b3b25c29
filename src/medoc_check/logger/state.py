"""Process-wide logger state.

There is exactly one medoc_check root logger per process; everything that
setup and teardown need to share lives in this one object.
"""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class _LoggerState:
    """Mutable logger state, guarded by ``lock``.

    Attributes:
        lock: Serializes setup, flush and teardown
        root_initialized: Root logger has handlers attached
        config_applied: settings.conf levels have been applied
        queue_listener: Thread owning the console and file handlers
        log_queue: Queue between QueueHandler and the listener

    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    return _state
