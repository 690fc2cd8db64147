# ============================================
# projects/models/status.py
# ============================================
from django.db import models

from .validators import validate_not_blank


class Status(models.Model):
    """A column of a project's board; tasks point at one of them"""

    # (name, order, is_done) seeded for every new project
    DEFAULTS = (
        ('To Do', 0, False),
        ('In Progress', 1, False),
        ('Done', 2, True),
    )

    name = models.CharField(max_length=50, validators=[validate_not_blank])
    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='statuses'
    )
    order = models.IntegerField(default=0)
    is_done = models.BooleanField(default=False)

    class Meta:
        db_table = 'statuses'
        ordering = ['order']
        unique_together = ['name', 'project']
        indexes = [
            models.Index(fields=['project', 'order'], name='statuses_project_order_idx'),
        ]

    def __str__(self):
        return self.name

    @classmethod
    def create_defaults(cls, project):
        return cls.objects.bulk_create([
            cls(name=name, project=project, order=order, is_done=is_done)
            for name, order, is_done in cls.DEFAULTS
        ])
