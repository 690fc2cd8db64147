import pytest
from datetime import date
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from projects.services.project import ProjectService
from projects.services.task import TaskService

User = get_user_model()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "media")
    settings.USER_SERVICE_URL = None
    return settings.MEDIA_ROOT


@pytest.fixture
def user(db):
    return User.objects.create_user(username="owner", password="pass")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="intruder", password="pass")


@pytest.fixture
def api_client(user):
    api = APIClient()
    api.force_authenticate(user=user)
    return api


@pytest.fixture
def other_api_client(other_user):
    api = APIClient()
    api.force_authenticate(user=other_user)
    return api


@pytest.fixture
def project(user):
    return ProjectService.create_project(title="Website", owner_id=str(user.pk), description="Relaunch")


@pytest.fixture
def task(user, project):
    return TaskService.create_task(title="Landing page", project_id=project.id, user_id=str(user.pk))


@pytest.fixture
def log_day():
    return date(2025, 9, 20)
