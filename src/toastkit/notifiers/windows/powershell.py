"""通过 PowerShell 弹出 Windows toast 通知。"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from contextlib import suppress
from typing import Optional

from toastkit.errors import ExecutorError
from toastkit.notifiers.base import Executor

logger = logging.getLogger(__name__)


class PowerShellExecutor(Executor):
    """把脚本写入临时 .ps1 文件后交给 PowerShell 执行，结束后总会删除文件。"""

    def __init__(
        self,
        interpreter: str = "powershell.exe",
        execution_policy: str = "Bypass",
        temp_dir: Optional[str] = None,
        prefix: str = "toast_",
        suffix: str = ".ps1",
        timeout: Optional[float] = None,
    ) -> None:
        self.interpreter = interpreter
        self.execution_policy = execution_policy
        self.temp_dir = temp_dir
        self.prefix = prefix
        self.suffix = suffix
        self.timeout = timeout

    def execute(self, payload: bytes) -> None:
        path = self._write_script(payload)
        try:
            self._run(path)
        finally:
            with suppress(FileNotFoundError):
                os.remove(path)

    def command(self, path: str) -> list[str]:
        return [self.interpreter, "-ExecutionPolicy", self.execution_policy, "-File", path]

    def _write_script(self, payload: bytes) -> str:
        try:
            handle = tempfile.NamedTemporaryFile(
                mode="wb",
                prefix=self.prefix,
                suffix=self.suffix,
                dir=self.temp_dir,
                delete=False,
            )
        except OSError as exc:
            raise ExecutorError(f"creating temp script file: {exc}") from exc

        try:
            with handle:
                handle.write(payload)
        except OSError as exc:
            with suppress(FileNotFoundError):
                os.remove(handle.name)
            raise ExecutorError(f"writing to temp script file: {exc}") from exc

        logger.debug("通知脚本已写入 %s (%d 字节)", handle.name, len(payload))
        return handle.name

    def _run(self, path: str) -> None:
        cmd = self.command(path)
        try:
            subprocess.run(cmd, check=True, capture_output=True, timeout=self.timeout)
        except FileNotFoundError as exc:
            raise ExecutorError(f"interpreter not found: {self.interpreter}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ExecutorError(f"powershell script timed out after {self.timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            stderr = _decode(exc.stderr)
            logger.warning("PowerShell 退出码 %s: %s", exc.returncode, stderr.strip())
            raise ExecutorError(
                f"invoking powershell script: exit status {exc.returncode}",
                returncode=exc.returncode,
                stderr=stderr,
            ) from exc
        except OSError as exc:
            raise ExecutorError(f"invoking powershell script: {exc}") from exc


def _decode(output: Optional[bytes]) -> str:
    if not output:
        return ""
    return output.decode("utf-8", errors="replace")
