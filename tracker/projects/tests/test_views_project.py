import os

import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from projects.models import File, Liveness, Project, Status, Task, TimeLog
from projects.services.file import FileService
from projects.services.project import ProjectService
from projects.services.timelog import TimeLogService

URL = "/api/projects/"


@pytest.mark.django_db
def test_project_create_with_default_statuses(api_client, user):
    payload = {"title": "CRM", "description": "Sales pipeline", "logo": "https://cdn.example.com/crm.png"}
    resp = api_client.post(URL, payload, format="json")

    assert resp.status_code == 201, resp.content
    project = resp.json()["data"]["project"]
    assert project["owner"] == str(user.pk)
    assert project["logoUrl"] == "https://cdn.example.com/crm.png"
    assert project["displayLogo"] == "https://cdn.example.com/crm.png"
    assert project["ownerData"] is None

    statuses = list(Status.objects.filter(project_id=project["id"]).values_list("name", "is_done"))
    assert statuses == [("To Do", False), ("In Progress", False), ("Done", True)]


@pytest.mark.django_db
def test_project_create_requires_title(api_client):
    resp = api_client.post(URL, {"description": "No title"}, format="json")

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "error"
    assert "title" in body["errors"]
    assert Project.objects.count() == 0


@pytest.mark.django_db
def test_project_list_is_owner_scoped(api_client, other_api_client, project):
    other_api_client.post(URL, {"title": "Someone else's"}, format="json")

    body = api_client.get(URL).json()
    assert body["results"] == 1
    assert [p["title"] for p in body["data"]["projects"]] == ["Website"]


@pytest.mark.django_db
def test_project_hidden_from_other_users(other_api_client, project):
    resp = other_api_client.get(f"{URL}{project.id}/")
    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "message": "Project not found"}


@pytest.mark.django_db
def test_project_update_by_owner(api_client, project):
    resp = api_client.patch(f"{URL}{project.id}/", {"title": "Website v2", "logo": "/img/logo.svg"}, format="json")

    assert resp.status_code == 200, resp.content
    data = resp.json()["data"]["project"]
    assert data["title"] == "Website v2"
    assert data["logoUrl"] == "/img/logo.svg"


@pytest.mark.django_db
def test_project_mutations_denied_to_non_owner(other_api_client, project):
    resp = other_api_client.put(f"{URL}{project.id}/", {"title": "Hijacked"}, format="json")
    assert resp.status_code == 403
    assert resp.json()["message"] == "Not authorized to update this project"

    assert other_api_client.delete(f"{URL}{project.id}/").status_code == 403
    project.refresh_from_db()
    assert project.title == "Website"


@pytest.mark.django_db
def test_project_delete_retires_files_and_time_logs(api_client, user, project, task, log_day):
    upload = SimpleUploadedFile("brief.txt", b"scope", content_type="text/plain")
    file = FileService.upload_file(project_id=project.id, user_id=str(user.pk), upload=upload)
    time_log, _ = TimeLogService.create_time_log(
        task_id=task.id, hours=2, date=log_day, user_id=str(user.pk)
    )

    resp = api_client.delete(f"{URL}{project.id}/")

    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "Project deleted"}
    assert not Project.objects.filter(pk=project.pk).exists()
    assert not Task.objects.filter(pk=task.pk).exists()
    assert not Status.objects.filter(project_id=project.pk).exists()
    assert api_client.delete(f"{URL}{project.id}/").status_code == 404

    kept_file = File.objects.get(pk=file.pk)
    assert kept_file.state == Liveness.DELETED
    assert kept_file.project_id is None
    assert kept_file.updated_by == str(user.pk)
    assert default_storage.exists(kept_file.filepath)

    kept_log = TimeLog.objects.get(pk=time_log.pk)
    assert kept_log.state == Liveness.DELETED
    assert kept_log.task_id is None

    detail = api_client.get(f"/api/timelogs/{time_log.id}/").json()
    assert detail["data"]["timeLog"]["isActive"] is False
    assert detail["data"]["timeLog"]["task"] is None


@pytest.mark.django_db
def test_project_logo_upload(api_client, project):
    upload = SimpleUploadedFile("logo.png", b"\x89PNG fake", content_type="image/png")
    resp = api_client.post(f"{URL}{project.id}/logo/", {"file": upload}, format="multipart")

    assert resp.status_code == 200, resp.content
    data = resp.json()["data"]
    assert data["file"]["filename"] == "logo.png"
    assert data["file"]["filepath"].startswith("uploads/projects/")
    assert data["project"]["logo"] == data["file"]["id"]
    assert data["project"]["displayLogo"] == data["file"]["filepath"]


@pytest.mark.django_db
def test_project_logo_upload_requires_file(api_client, project):
    resp = api_client.post(f"{URL}{project.id}/logo/", {}, format="multipart")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_project_logo_bytes_removed_when_attach_fails(monkeypatch, media_root, user, project):
    def fail_save(self, *args, **kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(Project, "save", fail_save)
    upload = SimpleUploadedFile("logo.png", b"\x89PNG fake", content_type="image/png")

    with pytest.raises(RuntimeError):
        ProjectService.upload_logo(project=project, user_id=str(user.pk), upload=upload)

    assert File.objects.count() == 0
    assert os.listdir(os.path.join(media_root, "uploads", "projects")) == []


@pytest.mark.django_db
def test_project_logo_upload_size_limit(settings, api_client, project):
    settings.MAX_UPLOAD_SIZE = 1024 * 1024
    upload = SimpleUploadedFile("huge.png", b"0" * (1024 * 1024 + 1), content_type="image/png")

    resp = api_client.post(f"{URL}{project.id}/logo/", {"file": upload}, format="multipart")

    assert resp.status_code == 400
    assert resp.json()["message"] == "File too large (max 1 MB)"
    assert File.objects.count() == 0


def test_status_name_cannot_be_blank():
    from django.core.exceptions import ValidationError

    with pytest.raises(ValidationError):
        Status(name="   ", order=0).clean_fields(exclude=["project"])
