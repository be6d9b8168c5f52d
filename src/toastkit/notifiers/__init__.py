"""通知执行器。"""

from .base import Executor
from .simulated import SimulatedExecutor
from .windows import PowerShellExecutor

__all__ = [
    "Executor",
    "PowerShellExecutor",
    "SimulatedExecutor",
]
