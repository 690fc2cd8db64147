# ============================================
# projects/models/task.py
# ============================================
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .status import Status
from .validators import validate_not_blank


class Task(models.Model):
    title = models.CharField(max_length=255, validators=[validate_not_blank])
    description = models.TextField(blank=True)
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    assigned_to = models.CharField(max_length=64, blank=True, db_index=True)
    status = models.ForeignKey(
        'Status',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tasks'
    )
    # Running counter, only moved by the time-log workflow
    total_hours = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='tasks_project_status_idx'),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if not (self.status_id and self.project_id):
            return
        foreign = Status.objects.filter(pk=self.status_id).exclude(project_id=self.project_id)
        if foreign.exists():
            raise ValidationError({'status': 'Status does not belong to this project'})
