# ============================================
# projects/models/__init__.py
# ============================================
from .base import Liveness, SoftDeleteModel
from .project import Project
from .status import Status
from .task import Task
from .file import File
from .timelog import TimeLog

__all__ = [
    'Liveness',
    'SoftDeleteModel',
    'Project',
    'Status',
    'Task',
    'File',
    'TimeLog',
]
