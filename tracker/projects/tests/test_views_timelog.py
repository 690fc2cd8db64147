import pytest
from datetime import date
from projects.models import Task, TimeLog
from projects.services.timelog import TimeLogService

URL = "/api/timelogs/"


def _create(user, task, hours, day):
    time_log, _ = TimeLogService.create_time_log(
        task_id=task.id, hours=hours, date=day, user_id=str(user.pk)
    )
    return time_log


@pytest.mark.django_db
def test_create_time_log(api_client, user, task):
    payload = {"task": task.id, "hours": 2.5, "date": "2025-10-09", "description": "Code review"}
    resp = api_client.post(URL, payload, format="json")

    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["status"] == "success"
    assert body["data"]["timeLog"]["hours"] == 2.5
    assert body["data"]["timeLog"]["user"] == str(user.pk)
    assert body["data"]["timeLog"]["date"] == "2025-10-09"
    assert body["data"]["timeLog"]["isActive"] is True
    assert body["data"]["task"]["id"] == task.id
    assert body["data"]["task"]["totalHours"] == 2.5


@pytest.mark.django_db
def test_create_accepts_task_id_alias(api_client, task):
    resp = api_client.post(URL, {"taskId": task.id, "hours": "1", "date": "2025-10-09"}, format="json")
    assert resp.status_code == 201, resp.content
    assert Task.objects.get(pk=task.pk).total_hours == 1


@pytest.mark.django_db
@pytest.mark.parametrize("hours", [0, -2, "abc"])
def test_create_rejects_bad_hours(api_client, task, hours):
    resp = api_client.post(URL, {"task": task.id, "hours": hours, "date": "2025-10-09"}, format="json")

    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "message": "Hours must be a number greater than 0"}
    assert TimeLog.objects.count() == 0


@pytest.mark.django_db
def test_create_requires_date(api_client, task):
    resp = api_client.post(URL, {"task": task.id, "hours": 2}, format="json")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Task and date are required"


@pytest.mark.django_db
def test_create_unknown_task(api_client, task):
    resp = api_client.post(URL, {"task": task.id + 50, "hours": 2, "date": "2025-10-09"}, format="json")

    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "message": "Task not found"}
    assert TimeLog.objects.count() == 0


@pytest.mark.django_db
def test_requires_authentication(task):
    from rest_framework.test import APIClient

    resp = APIClient().post(URL, {"task": task.id, "hours": 2, "date": "2025-10-09"}, format="json")

    assert resp.status_code in (401, 403)
    assert resp.json()["status"] == "error"


@pytest.mark.django_db
def test_list_filters_by_date_range_newest_first(api_client, user, task):
    _create(user, task, 1, date(2025, 9, 1))
    _create(user, task, 2, date(2025, 9, 10))
    _create(user, task, 3, date(2025, 9, 20))

    resp = api_client.get(URL, {"startDate": "2025-09-05", "endDate": "2025-09-30"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["results"] == 2
    assert [log["date"] for log in body["data"]["timeLogs"]] == ["2025-09-20", "2025-09-10"]


@pytest.mark.django_db
def test_list_rejects_bad_filter(api_client):
    resp = api_client.get(URL, {"startDate": "yesterday"})
    assert resp.status_code == 400
    assert "startDate" in resp.json()["errors"]


@pytest.mark.django_db
def test_task_logs_and_summary(api_client, user, task, log_day):
    first = _create(user, task, 2, log_day)
    _create(user, task, 3, log_day)
    TimeLogService.delete_time_log(time_log=first, user_id=str(user.pk))

    logs = api_client.get(f"/api/timelogs/task/{task.id}/").json()
    assert logs["results"] == 1

    summary = api_client.get(f"/api/timelogs/task/{task.id}/summary/").json()
    assert summary == {"status": "success", "data": {"totalHours": 3.0, "entries": 1}}

    detail = api_client.get(f"/api/tasks/{task.id}/").json()
    assert detail["data"]["task"]["totalHours"] == 5.0


@pytest.mark.django_db
def test_summary_of_task_without_logs(api_client):
    resp = api_client.get("/api/timelogs/task/9999/summary/")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"totalHours": 0.0, "entries": 0}


@pytest.mark.django_db
def test_update_and_delete_by_owner(api_client, user, task, log_day):
    time_log = _create(user, task, 2, log_day)
    url = f"{URL}{time_log.id}/"

    resp = api_client.patch(url, {"hours": "4", "description": "Rework"}, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["data"]["timeLog"]["hours"] == 4.0

    resp = api_client.delete(url)
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": "Time log deleted successfully"}

    # deleted logs stay readable by id but cannot be changed again
    detail = api_client.get(url).json()
    assert detail["data"]["timeLog"]["isActive"] is False
    assert api_client.delete(url).status_code == 404


@pytest.mark.django_db
def test_non_owner_cannot_change_log(other_api_client, user, task, log_day):
    time_log = _create(user, task, 2, log_day)
    url = f"{URL}{time_log.id}/"

    resp = other_api_client.put(url, {"hours": 9}, format="json")
    assert resp.status_code == 403
    assert resp.json()["status"] == "error"

    assert other_api_client.delete(url).status_code == 403
    time_log.refresh_from_db()
    assert time_log.is_active
    assert time_log.hours == 2


@pytest.mark.django_db
def test_create_and_update_round_hours(api_client, task):
    resp = api_client.post(URL, {"task": task.id, "hours": "2.000", "date": "2025-10-09"}, format="json")
    assert resp.status_code == 201, resp.content
    assert resp.json()["data"]["timeLog"]["hours"] == 2.0

    url = f"{URL}{resp.json()['data']['timeLog']['id']}/"
    resp = api_client.patch(url, {"hours": 1.333}, format="json")
    assert resp.status_code == 200, resp.content
    assert resp.json()["data"]["timeLog"]["hours"] == 1.33

    resp = api_client.patch(url, {"hours": "0.001"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Hours must be a number greater than 0"


def test_create_schema_documents_task_alias():
    from drf_spectacular.generators import SchemaGenerator

    schema = SchemaGenerator().get_schema(request=None, public=True)
    body = schema["paths"]["/api/timelogs/"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    component = schema["components"]["schemas"][body["$ref"].rsplit("/", 1)[-1]]

    assert {"task", "taskId", "hours", "date"} <= set(component["properties"])
    assert set(component["required"]) == {"hours", "date"}
