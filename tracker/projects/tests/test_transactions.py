import pytest
from decimal import Decimal
from projects import transactions
from projects.exceptions import AtomicityUnsupported
from projects.models import Task, TimeLog
from projects.services.timelog import TimeLogService
from projects.transactions import AtomicExecutor, SequentialExecutor, get_executor


def test_get_executor_follows_setting(settings):
    settings.TRACKER_ATOMIC_WRITES = False
    assert isinstance(get_executor(), SequentialExecutor)

    settings.TRACKER_ATOMIC_WRITES = True
    assert isinstance(get_executor(), AtomicExecutor)

    settings.TRACKER_ATOMIC_WRITES = "auto"
    assert isinstance(get_executor(), AtomicExecutor)


def test_unknown_setting_falls_back_to_auto(settings, caplog):
    settings.TRACKER_ATOMIC_WRITES = "sometimes"
    with caplog.at_level("WARNING", logger="projects.transactions"):
        executor = get_executor()
    assert isinstance(executor, AtomicExecutor)
    assert "Unknown TRACKER_ATOMIC_WRITES" in caplog.text


def test_atomic_executor_refuses_without_transactions(monkeypatch):
    monkeypatch.setattr(transactions, "supports_atomic_writes", lambda using="default": False)
    calls = []

    with pytest.raises(AtomicityUnsupported):
        AtomicExecutor().run(lambda current: calls.append(current))

    # nothing ran
    assert calls == []


def test_sequential_executor_runs_work_directly():
    executor = SequentialExecutor()
    assert executor.run(lambda current: (current.atomic, current.using)) == (False, "default")


@pytest.mark.django_db
def test_create_falls_back_when_atomicity_unsupported(monkeypatch, caplog, user, task, log_day):
    monkeypatch.setattr(transactions, "supports_atomic_writes", lambda using="default": False)
    seen = []
    real_run = SequentialExecutor.run

    def tracking_run(self, work):
        seen.append(self)
        return real_run(self, work)

    monkeypatch.setattr(SequentialExecutor, "run", tracking_run)

    with caplog.at_level("WARNING", logger="projects.services.timelog"):
        time_log, updated = TimeLogService.create_time_log(
            task_id=task.id, hours=2, date=log_day, user_id=str(user.pk),
            executor=AtomicExecutor()
        )

    assert len(seen) == 1
    assert "without a transaction" in caplog.text
    assert TimeLog.objects.filter(pk=time_log.pk).exists()
    assert updated.total_hours == Decimal("2")
    assert Task.objects.get(pk=task.pk).total_hours == Decimal("2")


@pytest.mark.django_db
def test_failure_inside_atomic_scope_rolls_back(monkeypatch, user, task, log_day):
    def boom(self, *args, **kwargs):
        raise RuntimeError("connection dropped")

    # fails after both the insert and the increment were issued
    monkeypatch.setattr(Task, "refresh_from_db", boom)

    with pytest.raises(RuntimeError, match="connection dropped"):
        TimeLogService.create_time_log(
            task_id=task.id, hours=2, date=log_day, user_id=str(user.pk),
            executor=AtomicExecutor()
        )

    # no fallback replay, nothing persisted
    assert TimeLog.objects.count() == 0
    assert Task.objects.get(pk=task.pk).total_hours == 0


@pytest.mark.django_db
def test_sequential_executor_is_used_when_disabled(settings, user, task, log_day):
    settings.TRACKER_ATOMIC_WRITES = False

    _, updated = TimeLogService.create_time_log(
        task_id=task.id, hours="1.5", date=log_day, user_id=str(user.pk)
    )

    assert updated.total_hours == Decimal("1.5")
    assert TimeLog.objects.filter(task=task).count() == 1
