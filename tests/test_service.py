import pytest

from toastkit.config import AppConfig
from toastkit.errors import ExecutorError, InvalidDurationError
from toastkit.notification import Action, Notification
from toastkit.notifiers import PowerShellExecutor, SimulatedExecutor
from toastkit.service import Toaster, create_executor, push


def test_push_renders_and_executes() -> None:
    executor = SimulatedExecutor()

    push(Notification(title="Hello", message="World"), executor=executor)

    assert len(executor.payloads) == 1
    payload = executor.payloads[0]
    assert payload.startswith(b"\xef\xbb\xbf")
    assert b"<![CDATA[Hello]]>" in payload
    assert b'duration="short"' in payload


def test_push_stops_before_execute_on_invalid_duration() -> None:
    executor = SimulatedExecutor()

    with pytest.raises(InvalidDurationError):
        push(Notification(duration="extreme"), executor=executor)

    assert executor.payloads == []


def test_push_propagates_executor_error() -> None:
    error = ExecutorError("invoking powershell script: exit status 1", returncode=1)
    executor = SimulatedExecutor(error=error)

    with pytest.raises(ExecutorError) as excinfo:
        Toaster(executor=executor).push(Notification(title="x"))

    assert excinfo.value is error
    assert len(executor.payloads) == 1


def test_toaster_uses_configured_default_app_id() -> None:
    toaster = Toaster(executor=SimulatedExecutor(), config=AppConfig(default_app_id="toastkit"))

    payload = toaster.build(Notification(actions=[Action("protocol", "Open", "https://example.com")]))

    assert b"$APP_ID = 'toastkit'" in payload
    assert b'content="Open"' in payload


def test_create_executor_respects_dry_run() -> None:
    assert isinstance(create_executor(AppConfig(dry_run=True)), SimulatedExecutor)


def test_create_executor_builds_powershell_from_config() -> None:
    config = AppConfig(interpreter="pwsh", execution_policy="RemoteSigned", timeout_seconds=12.5)

    executor = create_executor(config)

    assert isinstance(executor, PowerShellExecutor)
    assert executor.interpreter == "pwsh"
    assert executor.execution_policy == "RemoteSigned"
    assert executor.timeout == 12.5
