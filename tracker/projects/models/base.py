# ============================================
# projects/models/base.py
# ============================================
from django.db import models


class Liveness(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    DELETED = 'DELETED', 'Deleted'


class SoftDeleteQuerySet(models.QuerySet):

    def active(self):
        return self.filter(state=Liveness.ACTIVE)

    def deleted(self):
        return self.filter(state=Liveness.DELETED)


class SoftDeleteModel(models.Model):
    """Records that are flagged as deleted instead of being removed.

    Listings go through ``objects.active()``; the row itself stays
    reachable by primary key.
    """
    state = models.CharField(
        max_length=10,
        choices=Liveness.choices,
        default=Liveness.ACTIVE,
        db_index=True
    )

    objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_active(self) -> bool:
        return self.state == Liveness.ACTIVE

    def mark_deleted(self) -> None:
        self.state = Liveness.DELETED

    def mark_active(self) -> None:
        self.state = Liveness.ACTIVE
