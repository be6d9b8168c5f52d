"""通知执行器抽象基类。"""

from __future__ import annotations

import abc


class Executor(abc.ABC):
    """执行渲染好的通知脚本，不同平台提供各自实现。"""

    @abc.abstractmethod
    def execute(self, payload: bytes) -> None:
        """执行脚本，失败时抛出 ExecutorError。"""

        raise NotImplementedError
