"""通知推送过程中的异常类型。"""

from __future__ import annotations

from typing import Optional


class ToastError(Exception):
    """所有通知错误的基类，`stage` 标识出错的阶段。"""

    stage = "unknown"


class InvalidDurationError(ToastError, ValueError):
    """通知时长不是 short/long。"""

    stage = "validation"

    def __init__(self, duration: object) -> None:
        super().__init__(f"invalid duration: {duration}")
        self.duration = duration


class TemplateError(ToastError):
    """通知模板无法生成脚本。"""

    stage = "render"


class ExecutorError(ToastError):
    """写入临时脚本或调用解释器失败。"""

    stage = "execute"

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
