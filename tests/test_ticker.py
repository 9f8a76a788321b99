import threading
import time
from datetime import timedelta

from accessmatch.ticker import Ticker


class _Counter:
    def __init__(self, target):
        self.count = 0
        self.target = target
        self.reached = threading.Event()
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.count += 1
            if self.count >= self.target:
                self.reached.set()


def test_ticks_repeatedly_until_stopped():
    counter = _Counter(target=3)
    ticker = Ticker(counter, 0.01)
    ticker.start()
    assert counter.reached.wait(5)
    ticker.stop()
    assert counter.count >= counter.target
    settled = counter.count
    time.sleep(0.05)
    assert counter.count == settled


def test_not_running_before_start_and_after_stop():
    ticker = Ticker(lambda: None, 0.01)
    assert ticker.running is False
    ticker.start()
    assert ticker.running is True
    ticker.stop()
    assert ticker.running is False


def test_stop_without_start_leaves_it_stopped():
    counter = _Counter(target=1)
    ticker = Ticker(counter, 0.01)
    ticker.stop()
    assert ticker.running is False
    assert counter.count == 0


def test_second_start_does_not_add_a_loop():
    counter = _Counter(target=1)
    ticker = Ticker(counter, 60)
    ticker.start()
    ticker.start()
    assert counter.reached.wait(5)
    time.sleep(0.05)
    began = time.monotonic()
    ticker.stop()
    assert time.monotonic() - began < 5
    assert counter.count == 1


def test_context_manager_starts_and_stops():
    counter = _Counter(target=2)
    with Ticker(counter, 0.01) as ticker:
        assert ticker.running is True
        assert counter.reached.wait(5)
    assert ticker.running is False
    assert counter.count >= counter.target


def test_timedelta_interval():
    counter = _Counter(target=2)
    ticker = Ticker(counter, timedelta(milliseconds=10))
    assert ticker.interval == timedelta(milliseconds=10).total_seconds()
    with ticker:
        assert counter.reached.wait(5)


def test_restart_after_stop():
    first = _Counter(target=1)
    ticker = Ticker(first, 0.01)
    ticker.start()
    assert first.reached.wait(5)
    ticker.stop()
    stopped_count = first.count
    ticker.start()
    deadline = time.monotonic() + 5
    while first.count <= stopped_count and time.monotonic() < deadline:
        time.sleep(0.01)
    ticker.stop()
    assert first.count > stopped_count


def test_stop_waits_for_running_callbacks():
    began = threading.Event()
    finished = threading.Event()

    def slow_tick():
        began.set()
        time.sleep(0.2)
        finished.set()

    ticker = Ticker(slow_tick, 60)
    ticker.start()
    assert began.wait(5)
    assert ticker.running is True
    ticker.stop()
    assert ticker.running is False
    assert finished.is_set()