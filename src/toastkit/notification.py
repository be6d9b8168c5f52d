"""Toast 通知数据模型与默认值处理。"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from toastkit.errors import InvalidDurationError

DEFAULT_ACTIVATION_TYPE = "protocol"


class Duration(str, Enum):
    """通知停留时长，仅支持 short 与 long。"""

    SHORT = "short"
    LONG = "long"

    @classmethod
    def is_valid(cls, value: object) -> bool:
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value in (cls.SHORT.value, cls.LONG.value)


@dataclass(frozen=True)
class Action:
    """通知上的一个按钮。

    只有 protocol 类型的按钮真正有用，因为无法收到用户点击的反馈，
    例如 `Action("protocol", "Open Maps", "bingmaps:?q=sushi")`。
    """

    type: str
    label: str
    arguments: str = ""


@dataclass
class Notification:
    """一次 toast 通知的全部内容。

    `app_id` 会显示在操作中心里，并用于对通知分组，建议使用可读的名称；
    为空时渲染阶段使用通用应用名。`icon` 应当是绝对路径，因为脚本从临时目录执行。
    `activation_arguments` 可设为 URI，点击通知时打开；默认点击只会关闭通知。
    """

    app_id: str = ""
    title: str = ""
    message: str = ""
    icon: str = ""
    activation_type: str = ""
    activation_arguments: str = ""
    actions: List[Action] = field(default_factory=list)
    duration: Union[Duration, str] = ""


def prepare(notification: Notification) -> Notification:
    """补全默认值并校验时长，返回新的通知对象，不修改入参。"""

    activation_type = notification.activation_type or DEFAULT_ACTIVATION_TYPE
    duration = notification.duration or Duration.SHORT
    if not Duration.is_valid(duration):
        raise InvalidDurationError(duration)

    return dataclasses.replace(
        notification,
        activation_type=activation_type,
        duration=Duration(duration),
        actions=list(notification.actions),
    )
