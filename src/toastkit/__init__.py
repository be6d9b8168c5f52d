"""Windows toast 通知：数据模型、脚本渲染与执行。"""

from .errors import ExecutorError, InvalidDurationError, TemplateError, ToastError
from .notification import Action, Duration, Notification, prepare
from .template import render
from .service import Toaster, push

__all__ = [
    "Action",
    "Duration",
    "ExecutorError",
    "InvalidDurationError",
    "Notification",
    "TemplateError",
    "ToastError",
    "Toaster",
    "prepare",
    "push",
    "render",
]
