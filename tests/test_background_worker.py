from __future__ import annotations

import threading
import time

from utils.background_worker import BackgroundWorker


def _inline_dispatcher(callback, *args):
    callback(*args)


def test_background_worker_delivers_result_through_dispatcher():
    worker = BackgroundWorker(dispatcher=_inline_dispatcher)
    delivered = threading.Event()
    results = []

    def on_success(value):
        results.append(value)
        delivered.set()

    worker.submit(lambda a, b: a + b, 2, 3, on_success=on_success)

    assert delivered.wait(timeout=1.0)
    assert results == [5]
    worker.shutdown()


def test_background_worker_routes_exceptions_to_on_error():
    worker = BackgroundWorker(dispatcher=_inline_dispatcher)
    delivered = threading.Event()
    errors = []
    successes = []

    def failing_task():
        raise RuntimeError("backend down")

    def on_error(exc):
        errors.append(exc)
        delivered.set()

    worker.submit(failing_task, on_success=successes.append, on_error=on_error)

    assert delivered.wait(timeout=1.0)
    assert isinstance(errors[0], RuntimeError)
    assert successes == []
    worker.shutdown()


def test_background_worker_passes_keyword_arguments():
    worker = BackgroundWorker(dispatcher=_inline_dispatcher)
    delivered = threading.Event()
    results = []

    def task(match_id, *, verbose=False):
        return (match_id, verbose)

    def on_success(value):
        results.append(value)
        delivered.set()

    worker.submit(task, "42", verbose=True, on_success=on_success)

    assert delivered.wait(timeout=1.0)
    assert results == [("42", True)]
    worker.shutdown()


def test_background_worker_ignores_tasks_after_shutdown():
    worker = BackgroundWorker(dispatcher=_inline_dispatcher)
    worker.shutdown()
    calls = []

    worker.submit(lambda: calls.append(1))
    time.sleep(0.1)

    assert calls == []


def test_background_worker_is_stopped():
    worker = BackgroundWorker()

    assert not worker.is_stopped()

    worker.shutdown()

    assert worker.is_stopped()


def test_background_worker_context_manager():
    result = []

    with BackgroundWorker() as worker:

        def task():
            result.append(1)

        worker.submit(task)
        time.sleep(0.1)

    assert result == [1]
    assert worker.is_stopped()


def test_background_worker_shutdown_waits_for_threads():
    worker = BackgroundWorker()
    completed = []

    def slow_task():
        while not worker.is_stopped():
            time.sleep(0.05)
        completed.append(1)

    worker.submit(slow_task)
    time.sleep(0.1)

    worker.shutdown(timeout=2.0)

    assert completed == [1]


def test_background_worker_shutdown_timeout():
    worker = BackgroundWorker()
    started = threading.Event()
    release = threading.Event()

    def blocking_task():
        started.set()
        release.wait(timeout=5.0)

    worker.submit(blocking_task)
    started.wait(timeout=1.0)

    worker.shutdown(timeout=0.2)

    assert worker.is_stopped()
    release.set()


def test_background_worker_drops_errors_after_shutdown():
    worker = BackgroundWorker(dispatcher=_inline_dispatcher)
    started = threading.Event()
    release = threading.Event()
    errors = []

    def failing_task():
        started.set()
        release.wait(timeout=2.0)
        raise RuntimeError("late failure")

    worker.submit(failing_task, on_error=errors.append)
    started.wait(timeout=1.0)
    worker.shutdown(timeout=0.0)
    release.set()
    time.sleep(0.2)

    assert errors == []
