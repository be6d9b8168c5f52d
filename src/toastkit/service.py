"""串联校验、渲染与执行的推送服务。"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from toastkit.config import AppConfig
from toastkit.notification import Notification, prepare
from toastkit.notifiers import Executor, PowerShellExecutor, SimulatedExecutor
from toastkit.template import render

logger = logging.getLogger(__name__)


def create_executor(config: AppConfig) -> Executor:
    """根据配置选择执行器。"""

    if config.dry_run:
        return SimulatedExecutor()

    if sys.platform != "win32":
        logger.warning("当前平台 %s 可能无法显示 Windows toast 通知", sys.platform)

    return PowerShellExecutor(
        interpreter=config.interpreter,
        execution_policy=config.execution_policy,
        temp_dir=config.temp_dir,
        prefix=config.script_prefix,
        suffix=config.script_suffix,
        timeout=config.timeout_seconds,
    )


class Toaster:
    """依次执行 prepare → render → execute，任何一步失败都直接抛出。"""

    def __init__(
        self,
        executor: Optional[Executor] = None,
        config: Optional[AppConfig] = None,
    ) -> None:
        self.config = config or AppConfig.load_default()
        self.executor = executor or create_executor(self.config)

    def build(self, notification: Notification) -> bytes:
        """只生成脚本，不执行。"""

        prepared = prepare(notification)
        return render(prepared, default_app_id=self.config.default_app_id)

    def push(self, notification: Notification) -> None:
        payload = self.build(notification)
        logger.info(
            "推送通知: app=%s, title=%s, actions=%d",
            notification.app_id or self.config.default_app_id,
            notification.title,
            len(notification.actions),
        )
        self.executor.execute(payload)


def push(
    notification: Notification,
    executor: Optional[Executor] = None,
    config: Optional[AppConfig] = None,
) -> None:
    """推送一条通知。"""

    Toaster(executor=executor, config=config).push(notification)
