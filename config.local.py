"""本地配置覆盖示例，`AppConfig.load()` 会自动导入。"""

from toastkit.config import AppConfig


def load_config() -> AppConfig:
    return AppConfig(
        default_app_id="Windows App",
        interpreter="powershell.exe",
        execution_policy="Bypass",
        timeout_seconds=30.0,
        log_level="INFO",
        api_host="127.0.0.1",
        api_port=8000,
        # temp_dir="C:/Users/me/AppData/Local/Temp/toastkit",
        # dry_run=True,
    )
