"""模拟执行器，用于演练和测试。"""

from __future__ import annotations

import logging
from typing import List, Optional

from toastkit.errors import ExecutorError
from toastkit.notifiers.base import Executor

logger = logging.getLogger(__name__)


class SimulatedExecutor(Executor):
    """只记录收到的脚本，不启动任何进程。"""

    def __init__(self, error: Optional[ExecutorError] = None) -> None:
        self.payloads: List[bytes] = []
        self._error = error

    def execute(self, payload: bytes) -> None:
        self.payloads.append(payload)
        logger.info("模拟执行通知脚本 (%d 字节)", len(payload))
        if self._error is not None:
            raise self._error
