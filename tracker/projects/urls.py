# ============================================
# projects/urls.py
# ============================================
from django.urls import path
from projects.views.project import (
    ProjectListCreateAPIView,
    ProjectDetailAPIView,
    ProjectLogoAPIView
)
from projects.views.task import (
    TaskListCreateAPIView,
    TaskDetailAPIView
)
from projects.views.file import (
    FileListCreateAPIView,
    FileDetailAPIView,
    FileDownloadAPIView
)
from projects.views.timelog import (
    TimeLogListCreateAPIView,
    TimeLogDetailAPIView,
    TaskTimeLogListAPIView,
    TaskTimeLogSummaryAPIView
)

app_name = 'projects'

urlpatterns = [
    # Projects
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/<int:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<int:project_id>/logo/', ProjectLogoAPIView.as_view(), name='project-logo'),

    # Tasks
    path('tasks/', TaskListCreateAPIView.as_view(), name='task-list-create'),
    path('tasks/<int:task_id>/', TaskDetailAPIView.as_view(), name='task-detail'),

    # Files
    path('files/', FileListCreateAPIView.as_view(), name='file-list-create'),
    path('files/<int:file_id>/', FileDetailAPIView.as_view(), name='file-detail'),
    path('files/<int:file_id>/download/', FileDownloadAPIView.as_view(), name='file-download'),

    # Time logs
    path('timelogs/', TimeLogListCreateAPIView.as_view(), name='timelog-list-create'),
    path('timelogs/<int:time_log_id>/', TimeLogDetailAPIView.as_view(), name='timelog-detail'),
    path('timelogs/task/<int:task_id>/', TaskTimeLogListAPIView.as_view(), name='task-timelogs'),
    path('timelogs/task/<int:task_id>/summary/', TaskTimeLogSummaryAPIView.as_view(), name='task-timelog-summary'),
]
