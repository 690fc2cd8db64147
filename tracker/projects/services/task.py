# ============================================
# projects/services/task.py
# ============================================
from typing import Optional
from projects.exceptions import NotFound
from projects.models import Project, Task
from projects.services.ownership import OwnershipGuard


class TaskService:

    @staticmethod
    def _get_owned_project(project_id, user_id: str) -> Project:
        try:
            return Project.objects.get(id=project_id, owner_id=user_id)
        except (Project.DoesNotExist, ValueError, TypeError):
            raise NotFound("Project not found")

    @staticmethod
    def create_task(
        *,
        title: str,
        project_id: int,
        user_id: str,
        description: str = '',
        status_id: Optional[int] = None,
        assigned_to: Optional[str] = None
    ) -> Task:
        """Create a task inside a project owned by the acting user"""

        project = TaskService._get_owned_project(project_id, user_id)

        task = Task(
            title=title,
            description=description or '',
            project=project,
            status_id=status_id,
            assigned_to=assigned_to or ''
        )
        task.full_clean()
        task.save()
        return task

    @staticmethod
    def update_task(
        *,
        task: Task,
        user_id: str,
        **data
    ) -> Task:
        """Update task details. The hours counter is not writable here."""

        OwnershipGuard.authorize(task.project, user_id, action='update tasks of')

        field_mapping = {
            'title': 'title',
            'description': 'description',
            'assigned_to': 'assigned_to',
            'status_id': 'status_id',
        }

        for field, attr in field_mapping.items():
            if field in data:
                value = data[field]
                if value is None and attr != 'status_id':
                    value = ''
                setattr(task, attr, value)

        task.full_clean()
        task.save()
        return task
