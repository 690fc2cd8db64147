# ============================================
# projects/models/timelog.py
# ============================================
from django.db import models

from .base import SoftDeleteModel
from .validators import validate_positive


class TimeLog(SoftDeleteModel):
    task = models.ForeignKey(
        'Task',
        on_delete=models.SET_NULL,
        null=True,
        related_name='time_logs'
    )
    user_id = models.CharField(max_length=64, db_index=True)
    hours = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        validators=[validate_positive]
    )
    date = models.DateField()
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    owner_field = 'user_id'

    class Meta:
        db_table = 'time_logs'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['task', 'state'], name='time_logs_task_state_idx'),
            models.Index(fields=['user_id', '-date'], name='time_logs_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.task_id} - {self.hours}h on {self.date}"
