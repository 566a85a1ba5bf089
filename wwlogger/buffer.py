"""Double-buffered hand-off of formatted log data to a worker thread."""

from __future__ import annotations

import threading
from typing import Callable

DEFAULT_CAPACITY = 1024 * 1024


class LoggerBuffer:
    """A fixed-capacity byte buffer with a read cursor."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._data = bytearray()
        self._read_pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._read_pos

    def push(self, data: bytes) -> None:
        """Append data; raises ``ValueError`` if it does not fit."""
        if not self.available(len(data)):
            raise ValueError(
                f"{len(data)} bytes do not fit in buffer of capacity {self.capacity}"
            )
        self._data += data

    def read(self) -> bytes:
        """Return everything not yet read and advance the read cursor."""
        chunk = bytes(self._data[self._read_pos:])
        self._read_pos = len(self._data)
        return chunk

    def empty(self) -> bool:
        return self._read_pos == len(self._data)

    def available(self, size: int) -> bool:
        return len(self._data) + size <= self.capacity

    def swap(self, other: "LoggerBuffer") -> None:
        """Exchange contents and capacity with another buffer."""
        self._data, other._data = other._data, self._data
        self._read_pos, other._read_pos = other._read_pos, self._read_pos
        self.capacity, other.capacity = other.capacity, self.capacity

    def reset(self) -> None:
        self._data = bytearray()
        self._read_pos = 0


class AsyncWorker:
    """Background thread that drains pushed data into a callback.

    Producers fill one buffer while the worker hands the other one to the
    callback; the buffers are swapped whenever the worker wakes up.
    """

    def __init__(
        self,
        callback: Callable[[bytes], None],
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._callback = callback
        self._producer = LoggerBuffer(capacity)
        self._consumer = LoggerBuffer(capacity)
        self._running = True
        self._lock = threading.Lock()
        self._space = threading.Condition(self._lock)
        self._pending = threading.Condition(self._lock)
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    @property
    def running(self) -> bool:
        return self._running

    def push(self, data: bytes) -> None:
        """Queue data, blocking while the producer buffer is full."""
        if len(data) > self._producer.capacity:
            raise ValueError(
                f"{len(data)} bytes exceed buffer capacity {self._producer.capacity}"
            )
        with self._lock:
            if not self._running:
                raise RuntimeError("worker has been stopped")
            self._space.wait_for(
                lambda: not self._running or self._producer.available(len(data))
            )
            if not self._running:
                raise RuntimeError("worker has been stopped")
            self._producer.push(data)
            self._pending.notify()

    def stop(self) -> None:
        """Drain whatever is queued and stop the thread."""
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._pending.notify_all()
            self._space.notify_all()
        self._thread.join()

    def __enter__(self) -> "AsyncWorker":
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _run(self) -> None:
        while True:
            with self._lock:
                self._pending.wait_for(
                    lambda: not self._running or not self._producer.empty()
                )
                if not self._running and self._producer.empty():
                    return
                self._producer.swap(self._consumer)
                self._space.notify_all()
            chunk = self._consumer.read()
            if chunk:
                self._callback(chunk)
            self._consumer.reset()