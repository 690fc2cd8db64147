# ============================================
# projects/services/timelog.py
# ============================================
"""
Time log writes.

Creating a log and bumping ``Task.total_hours`` belong together: they run
through a TransactionalExecutor so both land or neither does. When the
database cannot do transactions the same steps are replayed without one;
a crash between the insert and the increment then leaves the counter
behind the logs, which is accepted.
"""
import logging
import math
from datetime import date as date_type, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Tuple

from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from projects.exceptions import AtomicityUnsupported, InvalidValue, MissingField, NotFound
from projects.models import Task, TimeLog
from projects.selectors.task import TaskSelector
from projects.services.ownership import OwnershipGuard
from projects.transactions import SequentialExecutor, TransactionalExecutor, get_executor

logger = logging.getLogger(__name__)

HOURS_STEP = Decimal('0.01')


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_hours(value) -> Decimal:
    """
    Hours must be a finite number strictly greater than zero.
    Values are rounded half-up to hundredths, the stored precision.
    """
    if isinstance(value, bool) or _is_missing(value):
        raise InvalidValue("Hours must be a number greater than 0", code='invalid')
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidValue("Hours must be a number greater than 0", code='invalid')
    try:
        hours = Decimal(str(value).strip())
        if hours.is_finite():
            hours = hours.quantize(HOURS_STEP, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise InvalidValue("Hours must be a number greater than 0", code='invalid')
    if not hours.is_finite() or hours <= 0:
        raise InvalidValue("Hours must be a number greater than 0", code='invalid')
    return hours


def parse_log_date(value) -> date_type:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    text = str(value).strip()
    try:
        parsed = parse_date(text)
        if parsed is None:
            moment = parse_datetime(text)
            parsed = moment.date() if moment else None
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidValue("Date must be an ISO date (YYYY-MM-DD)", code='invalid')
    return parsed


class TimeLogService:

    @staticmethod
    def create_time_log(
        *,
        task_id,
        hours,
        date,
        user_id: str,
        description: Optional[str] = '',
        executor: Optional[TransactionalExecutor] = None
    ) -> Tuple[TimeLog, Task]:
        """
        Log hours against a task and add them to the task's running total.

        Checks run in order and stop at the first failure, before anything
        is written: task and date present, hours valid, task exists.
        Returns the new log together with the refreshed task.
        """
        if _is_missing(task_id) or _is_missing(date):
            raise MissingField("Task and date are required", code='required')

        hours = parse_hours(hours)
        log_date = parse_log_date(date)

        task = TaskSelector.get_task_by_id(task_id)
        if task is None:
            raise NotFound("Task not found")

        def write(current: TransactionalExecutor) -> Tuple[TimeLog, Task]:
            queryset = Task.objects.all()
            if current.atomic:
                queryset = queryset.select_for_update()
            try:
                locked = queryset.get(pk=task.pk)
            except Task.DoesNotExist:
                raise NotFound("Task not found")

            time_log = TimeLog(
                task=locked,
                user_id=user_id,
                hours=hours,
                date=log_date,
                description=description or ''
            )
            time_log.full_clean()
            time_log.save()

            Task.objects.filter(pk=locked.pk).update(
                total_hours=F('total_hours') + hours,
                updated_at=timezone.now()
            )
            locked.refresh_from_db()
            return time_log, locked

        executor = executor or get_executor()
        try:
            time_log, task = executor.run(write)
        except AtomicityUnsupported as exc:
            logger.warning(
                "[timelog] %s; logging hours for task %s without a transaction",
                exc, task.pk
            )
            time_log, task = SequentialExecutor(executor.using).run(write)

        logger.info(
            "[timelog] User %s logged %s h on task %s (total %s)",
            user_id, hours, task.pk, task.total_hours
        )
        return time_log, task

    @staticmethod
    def update_time_log(
        *,
        time_log: TimeLog,
        user_id: str,
        **data
    ) -> TimeLog:
        """
        Patch hours, date or description of a log, owner only.
        The task's running total is left as it is.
        """

        OwnershipGuard.authorize(time_log, user_id, action='update')

        if 'hours' in data:
            time_log.hours = parse_hours(data['hours'])

        if 'date' in data:
            if _is_missing(data['date']):
                raise MissingField("Date is required", code='required')
            time_log.date = parse_log_date(data['date'])

        if 'description' in data:
            time_log.description = data['description'] or ''

        time_log.full_clean()
        time_log.save()
        return time_log

    @staticmethod
    def delete_time_log(*, time_log: TimeLog, user_id: str) -> None:
        """Soft delete, owner only. The task's running total is not decremented."""

        OwnershipGuard.authorize(time_log, user_id, action='delete')

        time_log.mark_deleted()
        time_log.save(update_fields=['state', 'updated_at'])
        logger.info("[timelog] Time log %s deleted by %s", time_log.id, user_id)
