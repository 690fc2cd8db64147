# ============================================
# projects/models/file.py
# ============================================
from django.db import models
from django.utils import timezone

from .base import SoftDeleteModel
from .validators import validate_not_blank


class File(SoftDeleteModel):
    filename = models.CharField(max_length=255, validators=[validate_not_blank])
    filepath = models.CharField(max_length=500)
    # kept, soft-deleted, when the project goes away
    project = models.ForeignKey(
        'Project',
        on_delete=models.SET_NULL,
        null=True,
        related_name='files'
    )
    user_id = models.CharField(max_length=64, db_index=True)
    added_by = models.CharField(max_length=64)
    added_on = models.DateTimeField(default=timezone.now)
    updated_by = models.CharField(max_length=64, blank=True)
    updated_on = models.DateTimeField(null=True, blank=True)

    owner_field = 'user_id'

    class Meta:
        db_table = 'files'
        ordering = ['-added_on']
        indexes = [
            models.Index(fields=['project', 'state'], name='files_project_state_idx'),
        ]

    def __str__(self):
        return self.filename

    def touch(self, user_id: str) -> None:
        self.updated_by = user_id
        self.updated_on = timezone.now()
