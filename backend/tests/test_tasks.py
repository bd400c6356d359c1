import logging
import threading

from catalog.core.tasks import BackgroundDispatcher


def test_submitted_tasks_run_off_the_calling_thread():
    dispatcher = BackgroundDispatcher(max_workers=2)
    seen = []

    dispatcher.submit(lambda value: seen.append((value, threading.current_thread().name)), 42)
    dispatcher.shutdown(wait=True)

    assert len(seen) == 1
    value, thread_name = seen[0]
    assert value == 42
    assert thread_name != threading.current_thread().name
    assert thread_name.startswith("field-values")


def test_failures_are_logged_not_raised(caplog):
    caplog.set_level(logging.ERROR, logger="uvicorn")
    dispatcher = BackgroundDispatcher(max_workers=1)

    def explode():
        raise ValueError("boom")

    dispatcher.submit(explode, description="create FieldValues for field 7")
    dispatcher.shutdown(wait=True)

    assert "create FieldValues for field 7 failed" in caplog.text
    assert "boom" in caplog.text


def test_dispatcher_can_be_reused_after_shutdown():
    dispatcher = BackgroundDispatcher(max_workers=1)
    seen = []

    dispatcher.submit(seen.append, 1)
    dispatcher.shutdown(wait=True)
    dispatcher.submit(seen.append, 2)
    dispatcher.shutdown(wait=True)

    assert seen == [1, 2]
