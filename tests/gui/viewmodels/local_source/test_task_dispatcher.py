import asyncio
import logging
import threading

import pytest

from pkgview.gui.viewmodels.local_source.dispatcher import TaskDispatcher


@pytest.mark.asyncio
async def test_post_runs_coroutine_on_loop():
    dispatcher = TaskDispatcher()
    dispatcher.bind()
    seen = []

    async def job(value):
        seen.append((value, threading.get_ident()))

    dispatcher.post(job, 1)
    await dispatcher.drain()

    assert seen == [(1, threading.get_ident())]
    assert dispatcher.pending_count == 0


@pytest.mark.asyncio
async def test_post_from_worker_thread_is_marshalled():
    dispatcher = TaskDispatcher()
    dispatcher.bind()
    loop_thread = threading.get_ident()
    seen = []

    async def job():
        seen.append(threading.get_ident())

    worker = threading.Thread(target=dispatcher.post, args=(job,))
    worker.start()
    worker.join()
    await asyncio.sleep(0)
    await dispatcher.drain()

    assert seen == [loop_thread]


@pytest.mark.asyncio
async def test_run_on_loop_is_immediate_on_loop_thread():
    dispatcher = TaskDispatcher()
    dispatcher.bind()
    seen = []

    dispatcher.run_on_loop(seen.append, "now")

    assert seen == ["now"]


@pytest.mark.asyncio
async def test_failed_task_is_logged(caplog):
    dispatcher = TaskDispatcher()
    dispatcher.bind()

    async def job():
        raise ValueError("bad")

    with caplog.at_level(logging.WARNING):
        dispatcher.post(job)
        dispatcher.spawn_detached(job)
        await dispatcher.drain()

    levels = sorted(r.levelno for r in caplog.records if "failed" in r.getMessage())
    assert levels == [logging.WARNING, logging.ERROR]


def test_unbound_dispatcher_outside_loop_raises():
    dispatcher = TaskDispatcher()

    async def job():
        pass

    with pytest.raises(RuntimeError, match="not bound"):
        dispatcher.post(job)
