# ============================================
# projects/selectors/timelog.py
# ============================================
from decimal import Decimal
from typing import Dict, List, Optional

from django.db.models import Count, QuerySet, Sum

from projects.clients.user_client import UserServiceClient
from projects.models import TimeLog


class TimeLogSelector:

    @staticmethod
    def get_time_log_by_id(time_log_id: int, include_deleted: bool = False) -> Optional[TimeLog]:
        queryset = TimeLog.objects.select_related('task')
        if not include_deleted:
            queryset = queryset.active()
        try:
            return queryset.get(id=time_log_id)
        except TimeLog.DoesNotExist:
            return None

    @staticmethod
    def get_time_logs_list(task_id: int = None, start_date=None, end_date=None,
                           user_id: str = None) -> QuerySet:
        """Active logs, newest date first"""
        queryset = TimeLog.objects.active().select_related('task')

        if task_id:
            queryset = queryset.filter(task_id=task_id)

        if start_date:
            queryset = queryset.filter(date__gte=start_date)

        if end_date:
            queryset = queryset.filter(date__lte=end_date)

        if user_id:
            queryset = queryset.filter(user_id=user_id)

        return queryset.order_by('-date', '-created_at')

    @staticmethod
    def get_time_logs_by_task(task_id: int) -> QuerySet:
        return TimeLogSelector.get_time_logs_list(task_id=task_id)

    @staticmethod
    def summarize_by_task(task_id: int) -> Dict:
        """
        Hours and entry count over the active logs of a task.
        A task without logs yields a zero summary, never a not-found.
        """
        result = TimeLog.objects.active().filter(task_id=task_id).aggregate(
            total_hours=Sum('hours'),
            entries=Count('id'),
        )
        return {
            'totalHours': result['total_hours'] or Decimal('0'),
            'entries': result['entries'] or 0,
        }

    @staticmethod
    def enrich_time_logs_with_users(time_logs: List[TimeLog]) -> List[TimeLog]:
        """Fetch and attach user data to time logs"""
        user_ids = list({str(t.user_id) for t in time_logs})
        users_dict = UserServiceClient.get_users_by_ids(user_ids)

        for time_log in time_logs:
            time_log.user_data = users_dict.get(str(time_log.user_id))

        return time_logs
