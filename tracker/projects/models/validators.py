# ============================================
# projects/models/validators.py
# ============================================
from decimal import Decimal

from django.core.exceptions import ValidationError


def validate_positive(value):
    if value is None or not value.is_finite() or value <= Decimal('0'):
        raise ValidationError('Hours must be a number greater than 0')


def validate_not_blank(value):
    if not value or not str(value).strip():
        raise ValidationError('This field cannot be blank')
