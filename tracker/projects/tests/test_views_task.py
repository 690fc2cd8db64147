import pytest
from projects.models import Status
from projects.services.project import ProjectService

URL = "/api/tasks/"


@pytest.mark.django_db
def test_task_create_with_status(api_client, project):
    todo = Status.objects.get(project=project, name="To Do")
    payload = {"title": "Wireframes", "project": project.id, "status": todo.id, "assignedTo": "u-42"}

    resp = api_client.post(URL, payload, format="json")

    assert resp.status_code == 201, resp.content
    task = resp.json()["data"]["task"]
    assert task["statusName"] == "To Do"
    assert task["assignedTo"] == "u-42"
    assert task["totalHours"] == 0.0


@pytest.mark.django_db
def test_task_status_must_belong_to_project(api_client, user, project):
    elsewhere = ProjectService.create_project(title="Other", owner_id=str(user.pk))
    foreign = Status.objects.get(project=elsewhere, name="Done")

    resp = api_client.post(URL, {"title": "Bad", "project": project.id, "status": foreign.id}, format="json")

    assert resp.status_code == 400
    assert resp.json()["errors"] == {"status": ["Status does not belong to this project"]}


@pytest.mark.django_db
def test_task_create_in_foreign_project(other_api_client, project):
    resp = other_api_client.post(URL, {"title": "Sneaky", "project": project.id}, format="json")
    assert resp.status_code == 404


@pytest.mark.django_db
def test_task_total_hours_not_writable(api_client, task):
    resp = api_client.patch(f"{URL}{task.id}/", {"title": "Landing v2", "totalHours": 99}, format="json")

    assert resp.status_code == 200, resp.content
    data = resp.json()["data"]["task"]
    assert data["title"] == "Landing v2"
    assert data["totalHours"] == 0.0


@pytest.mark.django_db
def test_task_update_denied_to_non_owner(other_api_client, task):
    resp = other_api_client.patch(f"{URL}{task.id}/", {"title": "Mine now"}, format="json")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_task_list_filters(api_client, user, project, task):
    done = Status.objects.get(project=project, name="Done")
    api_client.post(URL, {"title": "Ship", "project": project.id, "status": done.id}, format="json")

    all_tasks = api_client.get(URL, {"project": project.id}).json()
    assert all_tasks["results"] == 2

    finished = api_client.get(URL, {"status": done.id}).json()
    assert [t["title"] for t in finished["data"]["tasks"]] == ["Ship"]


@pytest.mark.django_db
def test_task_detail_hidden_from_other_users(other_api_client, task):
    assert other_api_client.get(f"{URL}{task.id}/").status_code == 404


@pytest.mark.django_db
def test_task_list_rejects_bad_filter(api_client):
    assert api_client.get(URL, {"project": "first"}).status_code == 400
