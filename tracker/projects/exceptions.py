# ============================================
# projects/exceptions.py
# ============================================
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class MissingField(ValidationError):
    """A required input field was not supplied"""


class InvalidValue(ValidationError):
    """An input field was supplied but could not be accepted"""


class NotFound(Exception):
    """Referenced record is absent or no longer active"""

    def __init__(self, message='Not found'):
        super().__init__(message)
        self.message = message


class AtomicityUnsupported(Exception):
    """The database cannot run several writes as one atomic unit"""


def _validation_payload(exc: ValidationError):
    if hasattr(exc, 'error_dict'):
        errors = {field: [str(m) for m in messages] for field, messages in exc.message_dict.items()}
        message = '; '.join(
            f"{field}: {' '.join(messages)}" if field != '__all__' else ' '.join(messages)
            for field, messages in errors.items()
        )
        return message, errors
    return '; '.join(exc.messages), None


def _drf_messages(detail):
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            text = ' '.join(_drf_messages(value))
            parts.append(text if field == 'non_field_errors' else f"{field}: {text}")
        return parts
    if isinstance(detail, list):
        return [m for item in detail for m in _drf_messages(item)]
    return [str(detail)]


def _error(message, code, errors=None):
    body = {'status': 'error', 'message': message}
    if errors:
        body['errors'] = errors
    return Response(body, status=code)


def api_exception_handler(exc, context):
    """
    Error boundary for every API request.

    Known failures are mapped to their status codes; anything else is
    logged with its traceback and answered with a generic 500 so one bad
    request never escapes the view layer.
    """
    if isinstance(exc, ValidationError):
        message, errors = _validation_payload(exc)
        return _error(message, status.HTTP_400_BAD_REQUEST, errors)

    if isinstance(exc, NotFound):
        return _error(exc.message, status.HTTP_404_NOT_FOUND)

    if isinstance(exc, (PermissionDenied, Http404)):
        response = drf_exception_handler(exc, context)
        message = str(exc) or response.data.get('detail')
        return _error(message, response.status_code)

    if isinstance(exc, drf_exceptions.APIException):
        response = drf_exception_handler(exc, context)
        if isinstance(exc, drf_exceptions.ValidationError):
            return _error('; '.join(_drf_messages(exc.detail)), response.status_code, exc.detail)
        error = _error('; '.join(_drf_messages(exc.detail)), response.status_code)
        for header in ('WWW-Authenticate', 'Retry-After'):
            if header in response:
                error[header] = response[header]
        return error

    view = context.get('view')
    logger.exception(
        "[api] Unhandled error in %s: %s",
        view.__class__.__name__ if view else 'unknown view',
        exc,
    )
    return _error('Internal Server Error', status.HTTP_500_INTERNAL_SERVER_ERROR)
