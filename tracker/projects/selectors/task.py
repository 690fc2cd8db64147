# ============================================
# projects/selectors/task.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from projects.models import Task


class TaskSelector:

    @staticmethod
    def get_task_by_id(task_id) -> Optional[Task]:
        try:
            return Task.objects.select_related('project', 'status').get(id=task_id)
        except (Task.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_owned_task(task_id: int, user_id: str) -> Optional[Task]:
        """Task visible through the ownership of its project"""
        try:
            return Task.objects.select_related('project', 'status').get(
                id=task_id, project__owner_id=user_id
            )
        except Task.DoesNotExist:
            return None

    @staticmethod
    def get_tasks_list(user_id: str, project_id: int = None, status_id: int = None,
                       assigned_to: str = None) -> QuerySet:
        queryset = Task.objects.select_related('project', 'status').filter(
            project__owner_id=user_id
        )

        if project_id:
            queryset = queryset.filter(project_id=project_id)

        if status_id:
            queryset = queryset.filter(status_id=status_id)

        if assigned_to:
            queryset = queryset.filter(assigned_to=assigned_to)

        return queryset.order_by('-created_at')
