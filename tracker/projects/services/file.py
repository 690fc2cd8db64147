# ============================================
# projects/services/file.py
# ============================================
import logging
import os
import time
from typing import Optional

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

from projects.exceptions import InvalidValue, MissingField, NotFound
from projects.models import File, Project
from projects.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)

UPLOAD_DIRECTORY = 'uploads'
DEFAULT_MAX_UPLOAD_SIZE = 20 * 1024 * 1024


class FileService:

    @staticmethod
    def _storage_name(original_name: str, directory: str) -> str:
        """Timestamped name so two uploads of the same file never collide"""
        base = get_valid_filename(os.path.basename(original_name or 'file'))
        return f"{directory}/{int(time.time() * 1000)}-{base}"

    @staticmethod
    def create_file(*, project: Project, user_id: str, upload, directory: str = UPLOAD_DIRECTORY) -> File:
        """Persist the uploaded bytes and record them as a File"""

        limit = getattr(settings, 'MAX_UPLOAD_SIZE', DEFAULT_MAX_UPLOAD_SIZE)
        if upload.size is not None and upload.size > limit:
            raise InvalidValue(
                f"File too large (max {limit // (1024 * 1024)} MB)",
                code='max_size'
            )

        stored_path = default_storage.save(
            FileService._storage_name(upload.name, directory),
            upload
        )

        file = File(
            filename=upload.name or os.path.basename(stored_path),
            filepath=stored_path,
            project=project,
            user_id=user_id,
            added_by=user_id
        )
        try:
            file.full_clean()
            file.save()
        except Exception:
            default_storage.delete(stored_path)
            raise

        logger.info("[file] Stored %s for project %s", stored_path, project.id)
        return file

    @staticmethod
    def upload_file(*, project_id, user_id: str, upload) -> File:
        """Upload a file into a project"""

        if upload is None:
            raise MissingField("No file uploaded")

        if not project_id:
            raise MissingField("Project ID is required")

        try:
            project = Project.objects.get(id=project_id)
        except (Project.DoesNotExist, ValueError, TypeError):
            raise NotFound("Project not found")

        return FileService.create_file(project=project, user_id=user_id, upload=upload)

    @staticmethod
    def update_file(
        *,
        file: File,
        user_id: str,
        filename: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> File:
        """Rename or (de)activate a file, owner only"""

        OwnershipGuard.authorize(file, user_id, action='update')

        if filename:
            file.filename = filename
        if is_active is not None:
            if is_active:
                file.mark_active()
            else:
                file.mark_deleted()

        file.touch(user_id)
        file.full_clean()
        file.save()
        return file

    @staticmethod
    def delete_file(*, file: File, user_id: str) -> None:
        """Soft delete, the bytes and the record are kept"""

        OwnershipGuard.authorize(file, user_id, action='delete')

        file.mark_deleted()
        file.touch(user_id)
        file.save(update_fields=['state', 'updated_by', 'updated_on'])
        logger.info("[file] File %s deleted by %s", file.id, user_id)

    @staticmethod
    def open_file(file: File):
        """Open the stored bytes of an active file"""

        if not file.is_active:
            raise NotFound("File not found")
        if not default_storage.exists(file.filepath):
            raise NotFound("File not found on server")
        return default_storage.open(file.filepath, 'rb')
