from fastapi.testclient import TestClient

from toastkit.api import create_app
from toastkit.errors import ExecutorError
from toastkit.notifiers import SimulatedExecutor
from toastkit.service import Toaster


def _client(executor: SimulatedExecutor) -> TestClient:
    return TestClient(create_app(Toaster(executor=executor)))


def test_health() -> None:
    response = _client(SimulatedExecutor()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_push_notification() -> None:
    executor = SimulatedExecutor()
    body = {
        "title": "Hello",
        "message": "World",
        "actions": [{"type": "protocol", "label": "Open Maps", "arguments": "bingmaps:?q=sushi"}],
    }

    response = _client(executor).post("/notifications", json=body)

    assert response.status_code == 202
    assert response.json() == {"status": "sent"}
    assert len(executor.payloads) == 1
    assert b'content="Open Maps"' in executor.payloads[0]


def test_push_invalid_duration_returns_422() -> None:
    executor = SimulatedExecutor()

    response = _client(executor).post("/notifications", json={"duration": "extreme"})

    assert response.status_code == 422
    assert "extreme" in response.json()["detail"]
    assert executor.payloads == []


def test_push_executor_failure_returns_502() -> None:
    executor = SimulatedExecutor(error=ExecutorError("invoking powershell script: exit status 1"))

    response = _client(executor).post("/notifications", json={"title": "x"})

    assert response.status_code == 502
    assert "exit status 1" in response.json()["detail"]


def test_render_preview_does_not_execute() -> None:
    executor = SimulatedExecutor()

    response = _client(executor).post("/notifications/render", json={"title": "Preview"})

    assert response.status_code == 200
    assert response.content.startswith(b"\xef\xbb\xbf")
    assert b"<![CDATA[Preview]]>" in response.content
    assert executor.payloads == []


def test_push_unencodable_title_returns_500() -> None:
    executor = SimulatedExecutor()

    response = _client(executor).post(
        "/notifications",
        content=b'{"title": "\\ud800"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    assert "encoding toast script" in response.json()["detail"]
    assert executor.payloads == []


def test_push_accepts_action_with_only_arguments() -> None:
    executor = SimulatedExecutor()

    response = _client(executor).post("/notifications", json={"actions": [{"arguments": "app:open"}]})

    assert response.status_code == 202
    assert b'<action activationType="" content="" arguments="app:open" />' in executor.payloads[0]
