import json
from unittest.mock import MagicMock

import pytest
import requests

from task_manager_client import TaskManagerAPI


def _response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://tasks.test/tasks"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return TaskManagerAPI(base_url="http://tasks.test/", session=session)


def test_base_url_from_environment(monkeypatch, session):
    monkeypatch.setenv("TASKS_API_URL", "http://env.test:4000/")

    assert TaskManagerAPI(session=session).base_url == "http://env.test:4000"


def test_create_task_posts_both_fields(api, session):
    session.request.return_value = _response(201, {"id": "1", "title": "a", "description": None})

    task, error = api.create_task(title="a")

    assert error is None
    assert task["id"] == "1"
    session.request.assert_called_once_with(
        method="POST",
        url="http://tasks.test/tasks",
        json={"title": "a", "description": None},
        timeout=15,
    )


def test_list_tasks(api, session):
    session.request.return_value = _response(200, [{"id": "1"}, {"id": "2"}])

    tasks, error = api.list_tasks()

    assert error is None
    assert [t["id"] for t in tasks] == ["1", "2"]


def test_update_task_puts_to_item_path(api, session):
    session.request.return_value = _response(200, {"id": "1", "title": "b", "description": "c"})

    task, error = api.update_task("1", title="b", description="c")

    assert error is None
    assert task["title"] == "b"
    assert session.request.call_args.kwargs["method"] == "PUT"
    assert session.request.call_args.kwargs["url"] == "http://tasks.test/tasks/1"


def test_not_found_reports_service_message(api, session):
    session.request.return_value = _response(404, {"error": "Task not found"})

    task, error = api.get_task("missing")

    assert task is None
    assert error == {"status_code": 404, "message": "Task not found"}


def test_delete_task(api, session):
    session.request.return_value = _response(200, {"message": "Task deleted successfully"})

    assert api.delete_task("1") == (True, None)


def test_delete_task_server_error(api, session):
    session.request.return_value = _response(500, {"error": "Internal Server Error"})

    ok, error = api.delete_task("1")

    assert ok is False
    assert error["status_code"] == 500
    assert error["message"] == "Internal Server Error"


def test_validation_error_falls_back_to_detail(api, session):
    session.request.return_value = _response(422, {"detail": [{"msg": "JSON decode error"}]})

    _, error = api.create_task()

    assert error["status_code"] == 422
    assert "JSON decode error" in error["message"]


def test_non_json_error_body_uses_text(api, session):
    session.request.return_value = _response(502, text="Bad Gateway")

    tasks, error = api.list_tasks()

    assert tasks == []
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    tasks, error = api.list_tasks()

    assert tasks == []
    assert error == {"status_code": None, "message": "refused"}
