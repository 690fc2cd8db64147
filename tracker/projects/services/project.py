# ============================================
# projects/services/project.py
# ============================================
import logging
from typing import Tuple
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils import timezone
from projects.models import File, Liveness, Project, Status, TimeLog
from projects.services.file import FileService
from projects.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)

LOGO_DIRECTORY = 'uploads/projects'


class ProjectService:

    @staticmethod
    @transaction.atomic
    def create_project(
        *,
        title: str,
        owner_id: str,
        description: str = '',
        logo: str = ''
    ) -> Project:
        """Create a new project with its default statuses"""

        # A logo given in the body is a plain URL/path, uploads go through upload_logo
        project = Project(
            title=title,
            description=description or '',
            owner_id=owner_id,
            logo_url=logo or ''
        )
        project.full_clean()
        project.save()

        Status.create_defaults(project)

        logger.info("[project] Created project %s for owner %s", project.id, owner_id)
        return project

    @staticmethod
    def update_project(
        *,
        project: Project,
        user_id: str,
        **data
    ) -> Project:
        """Update project"""

        OwnershipGuard.authorize(project, user_id, action='update')

        if 'logo' in data:
            data['logo_url'] = data.pop('logo') or ''

        for field in ('title', 'description', 'logo_url'):
            if field in data:
                setattr(project, field, data[field] if data[field] is not None else '')

        project.full_clean()
        project.save()
        return project

    @staticmethod
    @transaction.atomic
    def delete_project(*, project: Project, user_id: str) -> None:
        """
        Delete a project together with its statuses and tasks.

        Its files and time logs are soft-deleted and kept, detached from
        the project and task, so they stay reachable by id.
        """

        OwnershipGuard.authorize(project, user_id, action='delete')

        now = timezone.now()
        files = File.objects.active().filter(project=project).update(
            state=Liveness.DELETED, updated_by=user_id, updated_on=now
        )
        time_logs = TimeLog.objects.active().filter(task__project=project).update(
            state=Liveness.DELETED, updated_at=now
        )

        project_id = project.id
        project.delete()
        logger.info(
            "[project] Deleted project %s by %s (%s files, %s time logs retired)",
            project_id, user_id, files, time_logs
        )

    @staticmethod
    @transaction.atomic
    def upload_logo(*, project: Project, user_id: str, upload) -> Tuple[Project, File]:
        """Store an uploaded logo as a File record and attach it to the project"""

        OwnershipGuard.authorize(project, user_id, action='update')

        logo = FileService.create_file(
            project=project,
            user_id=user_id,
            upload=upload,
            directory=LOGO_DIRECTORY
        )

        project.logo = logo
        try:
            project.save(update_fields=['logo', 'updated_at'])
        except Exception:
            # the File row is rolled back, the stored bytes are not
            default_storage.delete(logo.filepath)
            raise
        return project, logo
