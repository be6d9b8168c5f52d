"""Windows 平台执行器。"""

from .powershell import PowerShellExecutor

__all__ = [
    "PowerShellExecutor",
]
