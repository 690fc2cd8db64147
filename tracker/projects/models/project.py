# ============================================
# projects/models/project.py
# ============================================
from django.db import models

from .validators import validate_not_blank


class Project(models.Model):
    title = models.CharField(max_length=255, validators=[validate_not_blank])
    description = models.TextField(blank=True)
    owner_id = models.CharField(max_length=64, db_index=True)
    logo = models.ForeignKey(
        'File',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    logo_url = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    owner_field = 'owner_id'

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def display_logo(self):
        """Uploaded logo file wins over the raw URL when it is still active."""
        if self.logo_id and self.logo and self.logo.is_active:
            return self.logo.filepath
        return self.logo_url or None
