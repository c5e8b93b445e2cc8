from __future__ import annotations

import logging

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.errors import NotFoundError, ValidationError
from taskdesk.models import Executor, ExecutorStatus, Task, TaskStatus
from taskdesk.services import ExecutorService, TaskCoordinator, TaskService, executor_status_for

pytestmark = pytest.mark.asyncio


async def _create_executor(
    session: AsyncSession,
    name: str = "Alice",
    status: ExecutorStatus = ExecutorStatus.FREE,
) -> Executor:
    service = ExecutorService(session)
    executor = await service.create_executor(name=name, specialization="Backend", rating=4.5)
    if status != ExecutorStatus.FREE:
        await service.update_status(executor.id, status)
    return executor


async def _reload_executor(factory: async_sessionmaker[AsyncSession], executor_id: int) -> Executor | None:
    async with factory() as fresh:
        return await fresh.get(Executor, executor_id)


async def _reload_task(factory: async_sessionmaker[AsyncSession], task_id: int) -> Task | None:
    async with factory() as fresh:
        return await fresh.get(Task, task_id)


async def test_executor_status_for_maps_only_in_progress_to_busy() -> None:
    assert executor_status_for(TaskStatus.IN_PROGRESS) is ExecutorStatus.BUSY
    assert executor_status_for(TaskStatus.PENDING) is ExecutorStatus.FREE
    assert executor_status_for(TaskStatus.DONE) is ExecutorStatus.FREE


@pytest.mark.parametrize("initial", [ExecutorStatus.FREE, ExecutorStatus.BUSY])
async def test_create_task_marks_executor_busy(session: AsyncSession, session_factory, initial) -> None:
    executor = await _create_executor(session, status=initial)

    task = await TaskCoordinator(session).create_task(title="Fix bug", executor_id=executor.id)

    assert task.id is not None
    assert task.status == TaskStatus.PENDING
    assert task.executor_name == "Alice"
    stored = await _reload_executor(session_factory, executor.id)
    assert stored is not None
    assert stored.status == ExecutorStatus.BUSY


async def test_create_task_warns_when_executor_already_busy(session: AsyncSession, caplog) -> None:
    executor = await _create_executor(session, status=ExecutorStatus.BUSY)

    with caplog.at_level(logging.WARNING, logger="taskdesk.services.coordinator"):
        await TaskCoordinator(session).create_task(title="Second job", executor_id=executor.id)

    assert any(record.getMessage() == "Executor assigned while already busy" for record in caplog.records)


async def test_create_task_keeps_supplied_executor_name(session: AsyncSession) -> None:
    executor = await _create_executor(session)

    task = await TaskCoordinator(session).create_task(
        title="Fix bug",
        executor_id=executor.id,
        executor_name="Alice (contract)",
    )

    assert task.executor_name == "Alice (contract)"


async def test_create_task_without_executor_touches_no_executor(session: AsyncSession, session_factory) -> None:
    executor = await _create_executor(session)

    task = await TaskCoordinator(session).create_task(title="Unassigned")

    assert task.executor_id is None
    stored = await _reload_executor(session_factory, executor.id)
    assert stored is not None
    assert stored.status == ExecutorStatus.FREE


async def test_create_task_with_unknown_executor_is_rejected(session: AsyncSession, session_factory) -> None:
    with pytest.raises(ValidationError):
        await TaskCoordinator(session).create_task(title="Orphan", executor_id=999)

    async with session_factory() as fresh:
        assert await TaskService(fresh).list_tasks() == []


@pytest.mark.parametrize(
    ("new_status", "expected"),
    [
        (TaskStatus.IN_PROGRESS, ExecutorStatus.BUSY),
        (TaskStatus.DONE, ExecutorStatus.FREE),
        (TaskStatus.PENDING, ExecutorStatus.FREE),
    ],
)
async def test_status_update_cascades_to_executor(
    session: AsyncSession,
    session_factory,
    new_status: TaskStatus,
    expected: ExecutorStatus,
) -> None:
    executor = await _create_executor(session)
    coordinator = TaskCoordinator(session)
    task = await coordinator.create_task(title="Fix bug", executor_id=executor.id)

    updated = await coordinator.update_task_status(task.id, new_status)

    assert updated.status == new_status
    stored = await _reload_executor(session_factory, executor.id)
    assert stored is not None
    assert stored.status == expected


async def test_status_update_of_missing_task_mutates_nothing(session: AsyncSession, session_factory) -> None:
    executor = await _create_executor(session, status=ExecutorStatus.BUSY)
    executor_id = executor.id

    with pytest.raises(NotFoundError):
        await TaskCoordinator(session).update_task_status(404, TaskStatus.DONE)

    stored = await _reload_executor(session_factory, executor_id)
    assert stored is not None
    assert stored.status == ExecutorStatus.BUSY


async def test_deleting_in_progress_task_frees_executor(session: AsyncSession, session_factory) -> None:
    executor = await _create_executor(session)
    coordinator = TaskCoordinator(session)
    task = await coordinator.create_task(title="Fix bug", executor_id=executor.id)
    await coordinator.update_task_status(task.id, TaskStatus.IN_PROGRESS)

    assert await coordinator.delete_task(task.id) is True

    assert await _reload_task(session_factory, task.id) is None
    stored = await _reload_executor(session_factory, executor.id)
    assert stored is not None
    assert stored.status == ExecutorStatus.FREE


@pytest.mark.parametrize("final_status", [TaskStatus.PENDING, TaskStatus.DONE])
async def test_deleting_inactive_task_leaves_executor_unchanged(
    session: AsyncSession,
    session_factory,
    final_status: TaskStatus,
) -> None:
    executor = await _create_executor(session)
    coordinator = TaskCoordinator(session)
    task = await coordinator.create_task(title="Fix bug", executor_id=executor.id, status=final_status)

    await coordinator.delete_task(task.id)

    # Creation left the executor busy and deleting a non-active task keeps it so.
    stored = await _reload_executor(session_factory, executor.id)
    assert stored is not None
    assert stored.status == ExecutorStatus.BUSY


async def test_deleting_missing_task_is_a_noop(session: AsyncSession) -> None:
    assert await TaskCoordinator(session).delete_task(12345) is False


async def test_failed_executor_write_rolls_back_task_write(
    session: AsyncSession,
    session_factory,
    monkeypatch,
) -> None:
    executor = await _create_executor(session)
    coordinator = TaskCoordinator(session)
    task = await coordinator.create_task(title="Fix bug", executor_id=executor.id)
    await coordinator.update_task_status(task.id, TaskStatus.DONE)
    task_id, executor_id = task.id, executor.id

    async def _fail(self, executor, status) -> None:
        raise RuntimeError("executor write failed")

    monkeypatch.setattr(TaskCoordinator, "_set_executor_status", _fail)

    with pytest.raises(RuntimeError):
        await coordinator.update_task_status(task_id, TaskStatus.IN_PROGRESS)

    stored_task = await _reload_task(session_factory, task_id)
    stored_executor = await _reload_executor(session_factory, executor_id)
    assert stored_task is not None
    assert stored_task.status == TaskStatus.DONE
    assert stored_executor is not None
    assert stored_executor.status == ExecutorStatus.FREE


async def test_failed_create_leaves_no_task(session: AsyncSession, session_factory, monkeypatch) -> None:
    executor = await _create_executor(session)
    executor_id = executor.id

    async def _fail(self, executor, status) -> None:
        raise RuntimeError("executor write failed")

    monkeypatch.setattr(TaskCoordinator, "_set_executor_status", _fail)

    with pytest.raises(RuntimeError):
        await TaskCoordinator(session).create_task(title="Fix bug", executor_id=executor_id)

    async with session_factory() as fresh:
        assert await TaskService(fresh).list_tasks() == []
    stored = await _reload_executor(session_factory, executor_id)
    assert stored is not None
    assert stored.status == ExecutorStatus.FREE


async def test_create_task_with_unknown_creator_writes_nothing(session: AsyncSession, session_factory) -> None:
    executor = await _create_executor(session)
    executor_id = executor.id

    with pytest.raises(ValidationError) as excinfo:
        await TaskCoordinator(session).create_task(title="Orphan", executor_id=executor_id, created_by=999)

    assert excinfo.value.details == {"created_by": 999}
    async with session_factory() as fresh:
        assert await TaskService(fresh).list_tasks() == []
    stored = await _reload_executor(session_factory, executor_id)
    assert stored is not None
    assert stored.status == ExecutorStatus.FREE
