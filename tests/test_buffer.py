import threading

import pytest

from wwlogger.buffer import AsyncWorker, LoggerBuffer


def test_push_then_read_round_trip():
    buf = LoggerBuffer(16)
    buf.push(b"abc")
    buf.push(b"def")
    assert not buf.empty()
    assert buf.read() == b"abcdef"
    assert buf.empty()
    assert buf.read() == b""


def test_default_capacity_is_one_mebibyte():
    assert LoggerBuffer().capacity == 1024 * 1024


def test_available_tracks_capacity():
    buf = LoggerBuffer(8)
    assert buf.available(8)
    assert not buf.available(9)
    buf.push(b"12345")
    assert buf.available(3)
    assert not buf.available(4)


def test_push_overflow_raises():
    buf = LoggerBuffer(4)
    buf.push(b"ab")
    with pytest.raises(ValueError):
        buf.push(b"xyz")
    assert buf.read() == b"ab"


def test_reset_empties_and_frees_space():
    buf = LoggerBuffer(4)
    buf.push(b"abcd")
    buf.reset()
    assert buf.empty()
    assert buf.available(4)
    assert len(buf) == 0


def test_swap_exchanges_contents():
    left = LoggerBuffer(10)
    right = LoggerBuffer(20)
    left.push(b"left")
    left.swap(right)
    assert left.empty()
    assert right.read() == b"left"
    assert left.capacity == 20
    assert right.capacity == 10


def test_len_counts_unread_bytes():
    buf = LoggerBuffer(10)
    buf.push(b"abc")
    assert len(buf) == 3
    buf.read()
    assert len(buf) == 0


def test_worker_delivers_in_order():
    received = []
    worker = AsyncWorker(received.append, capacity=64)
    lines = [f"line {i}\n".encode() for i in range(200)]
    for line in lines:
        worker.push(line)
    worker.stop()
    assert b"".join(received) == b"".join(lines)
    assert all(chunk for chunk in received)


def test_worker_multiple_producers():
    received = []
    lock = threading.Lock()

    def collect(chunk):
        with lock:
            received.append(chunk)

    worker = AsyncWorker(collect, capacity=256)
    threads_num, per_thread = 8, 500

    def produce():
        for _ in range(per_thread):
            worker.push(b"x\n")

    threads = [threading.Thread(target=produce) for _ in range(threads_num)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    worker.stop()
    assert not worker.running
    assert b"".join(received).count(b"x\n") == threads_num * per_thread


def test_worker_context_manager_drains():
    received = []
    with AsyncWorker(received.append) as worker:
        worker.push(b"a")
        worker.push(b"b")
    assert b"".join(received) == b"ab"
    assert not worker.running


def test_push_larger_than_capacity_raises():
    worker = AsyncWorker(lambda chunk: None, capacity=4)
    try:
        with pytest.raises(ValueError):
            worker.push(b"too long")
    finally:
        worker.stop()


def test_push_after_stop_raises():
    worker = AsyncWorker(lambda chunk: None)
    worker.stop()
    with pytest.raises(RuntimeError):
        worker.push(b"late")


def test_stop_twice_is_harmless():
    received = []
    worker = AsyncWorker(received.append)
    worker.push(b"once")
    worker.stop()
    worker.stop()
    assert received == [b"once"]