# ============================================
# projects/views/project.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.views import APIView
from rest_framework import status

from projects.exceptions import NotFound
from projects.serializers.file import FileOutputSerializer
from projects.serializers.project import (
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ProjectLogoSerializer,
    ProjectOutputSerializer
)
from projects.selectors.project import ProjectSelector
from projects.services.project import ProjectService
from projects.views.utils import PAGE_PARAMS, paginate, path_int, std_errors, success_response


def _get_owned_project_or_404(project_id, user_id):
    project = ProjectSelector.get_owned_project(project_id, user_id)
    if not project:
        raise NotFound('Project not found')
    return project


def _project_data(project):
    projects_with_users = ProjectSelector.enrich_projects_with_users([project])
    return {'project': ProjectOutputSerializer(projects_with_users[0]).data}


class ProjectListCreateAPIView(APIView):
    """
    GET: List the current user's projects
    POST: Create a new project

    Request body (POST):
    - title: string (required)
    - description: string (optional)
    - logo: string URL/path (optional)
    """

    @extend_schema(tags=['Projects'], summary='List own projects', parameters=PAGE_PARAMS)
    def get(self, request):
        projects = ProjectSelector.get_projects_list(user_id=str(request.user.pk))

        def serialize(page):
            page = ProjectSelector.enrich_projects_with_users(page)
            return ProjectOutputSerializer(page, many=True).data

        return paginate(request, projects, 'projects', serialize)

    @extend_schema(
        tags=['Projects'],
        summary='Create project',
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(
            owner_id=str(request.user.pk),
            **serializer.validated_data
        )

        return success_response(_project_data(project), status=status.HTTP_201_CREATED)


class ProjectDetailAPIView(APIView):
    """
    GET: Retrieve project details
    PUT/PATCH: Update project
    DELETE: Delete project

    Only the owner can see a project; other users get 404.
    """

    @extend_schema(tags=['Projects'], parameters=[path_int('project_id', 'Project ID')],
                   responses={200: ProjectOutputSerializer, **std_errors()})
    def get(self, request, project_id):
        project = _get_owned_project_or_404(project_id, str(request.user.pk))
        return success_response(_project_data(project))

    @extend_schema(tags=['Projects'], request=ProjectUpdateSerializer,
                   responses={200: ProjectOutputSerializer, **std_errors()})
    def put(self, request, project_id):
        user_id = str(request.user.pk)
        project = ProjectSelector.get_project_by_id(project_id)
        if not project:
            raise NotFound('Project not found')

        serializer = ProjectUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated_project = ProjectService.update_project(
            project=project,
            user_id=user_id,
            **serializer.validated_data
        )

        return success_response(_project_data(updated_project))

    patch = put

    @extend_schema(tags=['Projects'], responses={200: None, **std_errors()})
    def delete(self, request, project_id):
        project = ProjectSelector.get_project_by_id(project_id)
        if not project:
            raise NotFound('Project not found')

        ProjectService.delete_project(
            project=project,
            user_id=str(request.user.pk)
        )

        return success_response(message='Project deleted')


class ProjectLogoAPIView(APIView):
    """
    POST: Upload a logo image for a project (multipart field "file")
    """
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(tags=['Projects'], request=ProjectLogoSerializer,
                   responses={200: ProjectOutputSerializer, **std_errors()})
    def post(self, request, project_id):
        user_id = str(request.user.pk)
        project = _get_owned_project_or_404(project_id, user_id)

        serializer = ProjectLogoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project, logo = ProjectService.upload_logo(
            project=project,
            user_id=user_id,
            upload=serializer.validated_data['file']
        )

        data = _project_data(project)
        data['file'] = FileOutputSerializer(logo).data
        return success_response(data)
