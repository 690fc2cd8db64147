# ============================================
# projects/views/utils.py
# ============================================
"""
Shared tooling for the API views:
- success envelope {"status": "success", "data": {...}}
- page-number pagination that keeps the same envelope
- drf-spectacular helpers for documenting APIView classes
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers, status as http_status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def success_response(data=None, status=http_status.HTTP_200_OK, **extra):
    body = {'status': 'success'}
    body.update(extra)
    if data is not None:
        body['data'] = data
    return Response(body, status=status)


class EnvelopePagination(PageNumberPagination):
    page_size = 50
    page_query_param = 'page'
    page_size_query_param = 'page_size'
    max_page_size = 200

    def get_paginated_response_for(self, key, data):
        return success_response(
            {key: data},
            results=self.page.paginator.count,
            next=self.get_next_link(),
            previous=self.get_previous_link(),
        )


def paginate(request, queryset, key, serialize, page_size=None):
    """Paginate a queryset and wrap the page in the success envelope"""
    paginator = EnvelopePagination()
    if page_size:
        paginator.page_size = page_size
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response_for(key, serialize(page))


# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name='Error',
    fields={
        'status': serializers.CharField(),
        'message': serializers.CharField(),
    }
)


def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)


def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)


def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)


def q_date(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.DATE, OpenApiParameter.QUERY, required=required, description=description)


PAGE_PARAMS = [
    q_int('page', 'Page number (default 1)'),
    q_int('page_size', 'Page size (default 50, max 200)'),
]


def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ErrorSerializer, description='Bad Request'),
        401: OpenApiResponse(ErrorSerializer, description='Unauthorized'),
        403: OpenApiResponse(ErrorSerializer, description='Forbidden'),
        404: OpenApiResponse(ErrorSerializer, description='Not Found'),
    }
    if extra:
        errs.update(extra)
    return errs
