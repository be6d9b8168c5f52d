"""应用配置模型。"""

from __future__ import annotations

import importlib.util
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from toastkit.template import DEFAULT_APP_ID

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """总配置，控制默认应用名、PowerShell 调用方式与本地 API。"""

    default_app_id: str = DEFAULT_APP_ID
    interpreter: str = "powershell.exe"
    execution_policy: str = "Bypass"
    script_prefix: str = "toast_"
    script_suffix: str = ".ps1"
    temp_dir: Optional[str] = None
    timeout_seconds: Optional[float] = Field(None, gt=0.0)
    dry_run: bool = False
    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = Field(8000, ge=1, le=65535)

    @classmethod
    def load_default(cls) -> "AppConfig":
        return cls()

    @classmethod
    def load(cls) -> "AppConfig":
        """优先尝试加载项目根目录的 `config.local.py`，否则返回默认配置。"""

        root_dir = Path(__file__).resolve().parents[2]
        local_path = root_dir / "config.local.py"
        if not local_path.exists():
            return cls.load_default()

        spec = importlib.util.spec_from_file_location("config_local", local_path)
        if spec is None or spec.loader is None:
            return cls.load_default()

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)  # type: ignore[arg-type]
        except Exception:
            logger.warning("无法加载 %s，使用默认配置", local_path, exc_info=True)
            return cls.load_default()

        load_fn = getattr(module, "load_config", None)
        if callable(load_fn):
            try:
                return load_fn()
            except Exception:
                logger.warning("load_config() 执行失败，使用默认配置", exc_info=True)
                return cls.load_default()
        return cls.load_default()

    @classmethod
    def from_file(cls, path: Path) -> "AppConfig":
        """从 JSON 文件解析配置，文件缺失或字段非法时直接抛出异常。"""

        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)
