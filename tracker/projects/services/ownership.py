# ============================================
# projects/services/ownership.py
# ============================================
from django.core.exceptions import PermissionDenied
from django.db import models


class OwnershipGuard:
    """Mutations are reserved to the user recorded on the record itself"""

    @staticmethod
    def owner_of(record: models.Model) -> str:
        return str(getattr(record, record.owner_field))

    @staticmethod
    def is_owner(record: models.Model, user_id: str) -> bool:
        return OwnershipGuard.owner_of(record) == str(user_id)

    @staticmethod
    def authorize(record: models.Model, user_id: str, action: str = 'modify') -> None:
        if not OwnershipGuard.is_owner(record, user_id):
            label = record._meta.verbose_name
            raise PermissionDenied(f"Not authorized to {action} this {label}")
