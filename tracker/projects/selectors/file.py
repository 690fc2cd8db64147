# ============================================
# projects/selectors/file.py
# ============================================
from typing import Optional
from django.db.models import QuerySet
from projects.models import File


class FileSelector:

    @staticmethod
    def get_file_by_id(file_id: int, include_deleted: bool = False) -> Optional[File]:
        """Deleted files are only returned when explicitly asked for"""
        queryset = File.objects.select_related('project')
        if not include_deleted:
            queryset = queryset.active()
        try:
            return queryset.get(id=file_id)
        except File.DoesNotExist:
            return None

    @staticmethod
    def get_files_list(project_id: int = None, user_id: str = None) -> QuerySet:
        queryset = File.objects.active().select_related('project')

        if project_id:
            queryset = queryset.filter(project_id=project_id)

        if user_id:
            queryset = queryset.filter(user_id=user_id)

        return queryset.order_by('-added_on')
