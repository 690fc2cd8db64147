# ============================================
# projects/views/task.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView
from rest_framework import status

from projects.exceptions import NotFound
from projects.serializers.task import (
    TaskCreateSerializer,
    TaskFilterSerializer,
    TaskUpdateSerializer,
    TaskOutputSerializer
)
from projects.selectors.task import TaskSelector
from projects.services.task import TaskService
from projects.views.utils import PAGE_PARAMS, paginate, path_int, q_int, q_str, std_errors, success_response


class TaskListCreateAPIView(APIView):
    """
    GET: List tasks of the current user's projects
    POST: Create a new task

    Query params (GET):
    - project: int (optional)
    - status: int (optional)
    - assignedTo: string (optional)

    Request body (POST):
    - title: string (required)
    - project: int (required)
    - description: string (optional)
    - status: int (optional, a status of the same project)
    - assignedTo: string user id (optional)
    """

    @extend_schema(
        tags=['Tasks'],
        summary='List tasks',
        parameters=[
            q_int('project', 'Project ID'),
            q_int('status', 'Status ID'),
            q_str('assignedTo', 'Assignee user ID'),
            *PAGE_PARAMS,
        ],
    )
    def get(self, request):
        filters = TaskFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        tasks = TaskSelector.get_tasks_list(user_id=str(request.user.pk), **filters.validated_data)
        return paginate(
            request, tasks, 'tasks',
            lambda page: TaskOutputSerializer(page, many=True).data
        )

    @extend_schema(tags=['Tasks'], summary='Create task', request=TaskCreateSerializer,
                   responses={201: TaskOutputSerializer, **std_errors()})
    def post(self, request):
        serializer = TaskCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = TaskService.create_task(
            user_id=str(request.user.pk),
            **serializer.validated_data
        )

        return success_response(
            {'task': TaskOutputSerializer(task).data},
            status=status.HTTP_201_CREATED
        )


class TaskDetailAPIView(APIView):
    """
    GET: Retrieve task details
    PUT/PATCH: Update title, description, status or assignee
    """

    @extend_schema(tags=['Tasks'], parameters=[path_int('task_id', 'Task ID')],
                   responses={200: TaskOutputSerializer, **std_errors()})
    def get(self, request, task_id):
        task = TaskSelector.get_owned_task(task_id, str(request.user.pk))
        if not task:
            raise NotFound('Task not found')
        return success_response({'task': TaskOutputSerializer(task).data})

    @extend_schema(tags=['Tasks'], request=TaskUpdateSerializer,
                   responses={200: TaskOutputSerializer, **std_errors()})
    def put(self, request, task_id):
        task = TaskSelector.get_task_by_id(task_id)
        if not task:
            raise NotFound('Task not found')

        serializer = TaskUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated_task = TaskService.update_task(
            task=task,
            user_id=str(request.user.pk),
            **serializer.validated_data
        )

        return success_response({'task': TaskOutputSerializer(updated_task).data})

    patch = put
