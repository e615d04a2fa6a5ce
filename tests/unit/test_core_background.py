"""Unit tests for BackgroundTasks (fire-and-forget registry)."""

import asyncio

import pytest

from claimdesk.core.background import BackgroundTasks


@pytest.mark.unit
class TestBackgroundTasks:
    async def test_spawn_runs_without_awaiting(self, tasks: BackgroundTasks):
        done = asyncio.Event()

        async def job() -> None:
            done.set()

        tasks.spawn(job(), name="job")
        await tasks.drain()

        assert done.is_set()
        assert tasks.pending == 0

    async def test_failures_are_logged_not_raised(self, tasks: BackgroundTasks, logger):
        async def failing() -> None:
            raise RuntimeError("boom")

        tasks.spawn(failing(), name="failing")
        await tasks.drain()
        await asyncio.sleep(0)

        logger.error.assert_called_once()
        args, kwargs = logger.error.call_args
        assert args[0] == "background_task_failed"
        assert isinstance(kwargs["error"], RuntimeError)
        assert kwargs["task_name"] == "failing"

    async def test_drain_waits_for_tasks_spawned_meanwhile(
        self, tasks: BackgroundTasks
    ):
        results: list[str] = []

        async def child() -> None:
            results.append("child")

        async def parent() -> None:
            await asyncio.sleep(0)
            tasks.spawn(child(), name="child")
            results.append("parent")

        tasks.spawn(parent(), name="parent")
        await tasks.drain()

        assert results == ["parent", "child"]
