# ============================================
# projects/views/file.py
# ============================================
from django.http import FileResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.views import APIView
from rest_framework import status

from projects.exceptions import NotFound
from projects.serializers.file import (
    FileFilterSerializer,
    FileUploadSerializer,
    FileUpdateSerializer,
    FileOutputSerializer
)
from projects.selectors.file import FileSelector
from projects.services.file import FileService
from projects.views.utils import PAGE_PARAMS, paginate, path_int, q_int, q_str, std_errors, success_response


def _get_active_file_or_404(file_id):
    file = FileSelector.get_file_by_id(file_id)
    if not file:
        raise NotFound('File not found')
    return file


class FileListCreateAPIView(APIView):
    """
    GET: List active files
    POST: Upload a file (multipart: file, projectId)

    Query params (GET):
    - projectId: int (optional)
    - userId: string (optional)
    """
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        tags=['Files'],
        summary='List files',
        parameters=[q_int('projectId', 'Project ID'), q_str('userId', 'Uploader user ID'), *PAGE_PARAMS],
    )
    def get(self, request):
        filters = FileFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        files = FileSelector.get_files_list(**filters.validated_data)
        return paginate(
            request, files, 'files',
            lambda page: FileOutputSerializer(page, many=True).data
        )

    @extend_schema(tags=['Files'], summary='Upload file', request=FileUploadSerializer,
                   responses={201: FileOutputSerializer, **std_errors()})
    def post(self, request):
        upload = request.FILES.get('file')
        if upload is None and request.FILES:
            # Any field name is accepted, the first file wins
            upload = next(iter(request.FILES.values()))

        file = FileService.upload_file(
            project_id=request.data.get('projectId'),
            user_id=str(request.user.pk),
            upload=upload
        )

        return success_response(
            {'file': FileOutputSerializer(file).data},
            status=status.HTTP_201_CREATED
        )


class FileDetailAPIView(APIView):
    """
    GET: Retrieve an active file record
    PUT/PATCH: Rename or (de)activate a file, owner only
    DELETE: Soft delete a file, owner only
    """

    @extend_schema(tags=['Files'], parameters=[path_int('file_id', 'File ID')],
                   responses={200: FileOutputSerializer, **std_errors()})
    def get(self, request, file_id):
        file = _get_active_file_or_404(file_id)
        return success_response({'file': FileOutputSerializer(file).data})

    @extend_schema(tags=['Files'], request=FileUpdateSerializer,
                   responses={200: FileOutputSerializer, **std_errors()})
    def put(self, request, file_id):
        file = _get_active_file_or_404(file_id)

        serializer = FileUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated_file = FileService.update_file(
            file=file,
            user_id=str(request.user.pk),
            **serializer.validated_data
        )

        return success_response({'file': FileOutputSerializer(updated_file).data})

    patch = put

    @extend_schema(tags=['Files'], responses={200: None, **std_errors()})
    def delete(self, request, file_id):
        file = _get_active_file_or_404(file_id)

        FileService.delete_file(
            file=file,
            user_id=str(request.user.pk)
        )

        return success_response(message='File deleted successfully')


class FileDownloadAPIView(APIView):
    """
    GET: Stream the stored bytes of an active file
    """

    @extend_schema(tags=['Files'], responses={200: OpenApiTypes.BINARY, **std_errors()})
    def get(self, request, file_id):
        file = _get_active_file_or_404(file_id)
        handle = FileService.open_file(file)
        return FileResponse(handle, as_attachment=True, filename=file.filename)
