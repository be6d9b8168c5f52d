import json

import pytest
from pydantic import ValidationError

from toastkit.config import AppConfig


def test_load_default_values() -> None:
    config = AppConfig.load_default()

    assert config.default_app_id == "Windows App"
    assert config.interpreter == "powershell.exe"
    assert config.execution_policy == "Bypass"
    assert config.dry_run is False


def test_from_file_reads_json(tmp_path) -> None:
    path = tmp_path / "toastkit.json"
    path.write_text(json.dumps({"default_app_id": "Mail", "api_port": 9000, "dry_run": True}), encoding="utf-8")

    config = AppConfig.from_file(path)

    assert config.default_app_id == "Mail"
    assert config.api_port == 9000
    assert config.dry_run is True


def test_from_file_rejects_invalid_values(tmp_path) -> None:
    path = tmp_path / "toastkit.json"
    path.write_text(json.dumps({"api_port": 0, "timeout_seconds": -1}), encoding="utf-8")

    with pytest.raises(ValidationError):
        AppConfig.from_file(path)


def test_load_returns_app_config() -> None:
    assert isinstance(AppConfig.load(), AppConfig)
