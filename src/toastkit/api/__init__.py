"""HTTP 接口。"""

from .server import NotificationRequest, create_app

__all__ = [
    "NotificationRequest",
    "create_app",
]
