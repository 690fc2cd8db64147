# ============================================
# projects/views/timelog.py
# ============================================
from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework.views import APIView
from rest_framework import status

from projects.exceptions import NotFound
from projects.serializers.task import TaskOutputSerializer
from projects.serializers.timelog import (
    TimeLogCreateSerializer,
    TimeLogUpdateSerializer,
    TimeLogFilterSerializer,
    TimeLogOutputSerializer,
    TimeLogSummarySerializer
)
from projects.selectors.timelog import TimeLogSelector
from projects.services.timelog import TimeLogService
from projects.views.utils import PAGE_PARAMS, paginate, path_int, q_date, q_int, std_errors, success_response


def _serialize_logs(page):
    page = TimeLogSelector.enrich_time_logs_with_users(list(page))
    return TimeLogOutputSerializer(page, many=True).data


def _time_log_data(time_log):
    logs_with_users = TimeLogSelector.enrich_time_logs_with_users([time_log])
    return TimeLogOutputSerializer(logs_with_users[0]).data


class TimeLogListCreateAPIView(APIView):
    """
    GET: List active time logs, newest date first
    POST: Log hours against a task

    Query params (GET):
    - startDate: date (optional)
    - endDate: date (optional)
    - task: int (optional)

    Request body (POST):
    - task: int (required, "taskId" is accepted too)
    - hours: number > 0 (required)
    - date: date (required)
    - description: string (optional)
    """

    @extend_schema(
        tags=['Time logs'],
        summary='List time logs',
        parameters=[
            q_date('startDate', 'Only logs on or after this date'),
            q_date('endDate', 'Only logs on or before this date'),
            q_int('task', 'Task ID'),
            *PAGE_PARAMS,
        ],
    )
    def get(self, request):
        filters = TimeLogFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        time_logs = TimeLogSelector.get_time_logs_list(**filters.validated_data)
        return paginate(request, time_logs, 'timeLogs', _serialize_logs)

    @extend_schema(
        tags=['Time logs'],
        summary='Create time log',
        description='Creates the log and adds its hours to the task total in one unit of work.',
        request=TimeLogCreateSerializer,
        responses={201: TimeLogOutputSerializer, **std_errors()},
        examples=[
            OpenApiExample(
                'Two hours on a task',
                value={'task': 12, 'hours': 2, 'date': '2025-10-09', 'description': 'Code review'},
                request_only=True,
            )
        ],
    )
    def post(self, request):
        data = request.data
        task_id = data.get('task', data.get('taskId'))

        time_log, task = TimeLogService.create_time_log(
            task_id=task_id,
            hours=data.get('hours'),
            date=data.get('date'),
            description=data.get('description', ''),
            user_id=str(request.user.pk)
        )

        return success_response(
            {
                'timeLog': _time_log_data(time_log),
                'task': TaskOutputSerializer(task).data,
            },
            status=status.HTTP_201_CREATED
        )


class TimeLogDetailAPIView(APIView):
    """
    GET: Retrieve a time log by id, deleted ones included
    PUT/PATCH: Update hours, date or description, owner only
    DELETE: Soft delete, owner only
    """

    @staticmethod
    def _get_active_or_404(time_log_id):
        time_log = TimeLogSelector.get_time_log_by_id(time_log_id)
        if not time_log:
            raise NotFound('Time log not found')
        return time_log

    @extend_schema(tags=['Time logs'], parameters=[path_int('time_log_id', 'Time log ID')],
                   responses={200: TimeLogOutputSerializer, **std_errors()})
    def get(self, request, time_log_id):
        time_log = TimeLogSelector.get_time_log_by_id(time_log_id, include_deleted=True)
        if not time_log:
            raise NotFound('Time log not found')
        return success_response({'timeLog': _time_log_data(time_log)})

    @extend_schema(tags=['Time logs'], request=TimeLogUpdateSerializer,
                   responses={200: TimeLogOutputSerializer, **std_errors()})
    def put(self, request, time_log_id):
        time_log = self._get_active_or_404(time_log_id)

        serializer = TimeLogUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        updated = TimeLogService.update_time_log(
            time_log=time_log,
            user_id=str(request.user.pk),
            **serializer.validated_data
        )

        return success_response({'timeLog': _time_log_data(updated)})

    patch = put

    @extend_schema(tags=['Time logs'], responses={200: None, **std_errors()})
    def delete(self, request, time_log_id):
        time_log = self._get_active_or_404(time_log_id)

        TimeLogService.delete_time_log(
            time_log=time_log,
            user_id=str(request.user.pk)
        )

        return success_response(message='Time log deleted successfully')


class TaskTimeLogListAPIView(APIView):
    """
    GET: Active time logs of a task, newest date first
    """

    @extend_schema(tags=['Time logs'], parameters=[path_int('task_id', 'Task ID'), *PAGE_PARAMS])
    def get(self, request, task_id):
        time_logs = TimeLogSelector.get_time_logs_by_task(task_id)
        return paginate(request, time_logs, 'timeLogs', _serialize_logs)


class TaskTimeLogSummaryAPIView(APIView):
    """
    GET: Total hours and entry count over the active logs of a task
    """

    @extend_schema(tags=['Time logs'], parameters=[path_int('task_id', 'Task ID')],
                   responses={200: TimeLogSummarySerializer})
    def get(self, request, task_id):
        summary = TimeLogSelector.summarize_by_task(task_id)
        return success_response(TimeLogSummarySerializer(summary).data)
