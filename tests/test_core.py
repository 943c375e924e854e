"""Tests for core utilities."""

import asyncio
import threading

import pytest


def test_debounce_timer_fires_once_with_last_args(qapp, wait_until, pump):
    """Rapid triggers collapse into one call using the newest arguments."""
    from pyqt_fieldstate.core import DebounceTimer

    called = []
    timer = DebounceTimer(delay_ms=50, handler=lambda value: called.append(value))

    timer.trigger(1)
    timer.trigger(2)
    timer.trigger(3)
    assert timer.is_pending
    assert called == []

    wait_until(lambda: called)
    pump(100)
    assert called == [3]
    assert not timer.is_pending


def test_debounce_timer_cancel(qapp, pump):
    from pyqt_fieldstate.core import DebounceTimer

    called = []
    timer = DebounceTimer(delay_ms=20, handler=lambda: called.append(1))

    timer.trigger()
    timer.cancel()
    pump(80)

    assert called == []
    assert not timer.is_pending


def test_debounce_timer_rearms_after_firing(qapp, wait_until, pump):
    """A fired timer holds nothing pending; the next trigger fires with its own args."""
    from pyqt_fieldstate.core import DebounceTimer

    called = []
    timer = DebounceTimer(delay_ms=20, handler=lambda value: called.append(value))

    timer.trigger("a")
    wait_until(lambda: called == ["a"])
    assert not timer.is_pending

    timer.trigger("b")
    wait_until(lambda: called == ["a", "b"])
    pump(60)
    assert called == ["a", "b"]


def test_background_task_runs_plain_callable(qapp, wait_until):
    from pyqt_fieldstate.core import BackgroundTask

    results = []
    thread_ids = []

    def target(value):
        thread_ids.append(threading.get_ident())
        return value * 2

    task = BackgroundTask(target=target, args=(21,))
    task.result_ready.connect(results.append)
    task.start()

    wait_until(lambda: results)
    task.wait()
    assert results == [42]
    assert thread_ids[0] != threading.get_ident()


def test_background_task_runs_coroutine_function(qapp, wait_until):
    from pyqt_fieldstate.core import BackgroundTask

    results = []

    async def target(value):
        await asyncio.sleep(0.01)
        return f"checked {value}"

    task = BackgroundTask(target=target, args=("abc",))
    task.result_ready.connect(results.append)
    task.start()

    wait_until(lambda: results)
    task.wait()
    assert results == ["checked abc"]


def test_background_task_awaits_returned_coroutine(qapp, wait_until):
    """A plain callable returning a coroutine is awaited in the worker."""
    from pyqt_fieldstate.core import BackgroundTask

    results = []

    async def lookup(value):
        await asyncio.sleep(0.01)
        return value.upper()

    task = BackgroundTask(target=lambda value: lookup(value), args=("abc",))
    task.result_ready.connect(results.append)
    task.start()

    wait_until(lambda: results)
    task.wait()
    assert results == ["ABC"]


def test_background_task_reports_exception(qapp, wait_until):
    from pyqt_fieldstate.core import BackgroundTask

    errors = []

    def target():
        raise TimeoutError("backend down")

    task = BackgroundTask(target=target)
    task.error_occurred.connect(errors.append)
    task.start()

    wait_until(lambda: errors)
    task.wait()
    assert isinstance(errors[0], TimeoutError)


def test_background_task_cancel_suppresses_signals(qapp, pump):
    from pyqt_fieldstate.core import BackgroundTask

    results = []
    release = threading.Event()

    def target():
        release.wait(1)
        return "late"

    task = BackgroundTask(target=target)
    task.result_ready.connect(results.append)
    task.start()
    task.cancel()
    release.set()
    task.wait()
    pump(50)

    assert results == []
