# ============================================
# projects/selectors/project.py
# ============================================
from typing import List, Optional
from django.db.models import QuerySet
from projects.models import Project
from projects.clients.user_client import UserServiceClient


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project by ID, regardless of owner"""
        try:
            return Project.objects.select_related('logo').get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_owned_project(project_id: int, user_id: str) -> Optional[Project]:
        """Project lookups are scoped to the owner; other users see nothing"""
        try:
            return Project.objects.select_related('logo').get(id=project_id, owner_id=user_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_projects_list(user_id: str) -> QuerySet:
        return Project.objects.select_related('logo').filter(owner_id=user_id).order_by('-created_at')

    @staticmethod
    def enrich_projects_with_users(projects: List[Project]) -> List[Project]:
        """Fetch and attach owner data to projects"""
        owner_ids = list({str(p.owner_id) for p in projects})
        users_dict = UserServiceClient.get_users_by_ids(owner_ids)

        for project in projects:
            project.owner_data = users_dict.get(str(project.owner_id))

        return projects
