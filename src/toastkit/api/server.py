"""本地 FastAPI 服务，通过 HTTP 推送或预览通知。"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Response, status
from pydantic import BaseModel, Field

from toastkit.errors import ExecutorError, InvalidDurationError, TemplateError
from toastkit.notification import Action, Notification
from toastkit.service import Toaster

logger = logging.getLogger(__name__)


class ActionModel(BaseModel):
    type: str = ""
    label: str = ""
    arguments: str = ""


class NotificationRequest(BaseModel):
    """通知请求体，字段均可省略。"""

    app_id: str = ""
    title: str = ""
    message: str = ""
    icon: str = ""
    activation_type: str = ""
    activation_arguments: str = ""
    duration: str = ""
    actions: list[ActionModel] = Field(default_factory=list)

    def to_notification(self) -> Notification:
        return Notification(
            app_id=self.app_id,
            title=self.title,
            message=self.message,
            icon=self.icon,
            activation_type=self.activation_type,
            activation_arguments=self.activation_arguments,
            duration=self.duration,
            actions=[Action(a.type, a.label, a.arguments) for a in self.actions],
        )


def create_app(toaster: Optional[Toaster] = None) -> FastAPI:
    """构建 FastAPI 应用并注册路由。"""

    app = FastAPI(title="toastkit")
    _toaster = toaster or Toaster()

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/notifications", status_code=status.HTTP_202_ACCEPTED, tags=["notifications"])
    def push_notification(request: NotificationRequest) -> dict[str, str]:
        try:
            _toaster.push(request.to_notification())
        except InvalidDurationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except TemplateError as exc:
            logger.error("通知模板渲染失败", exc_info=True)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        except ExecutorError as exc:
            logger.error("通知脚本执行失败", exc_info=True)
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return {"status": "sent"}

    @app.post("/notifications/render", tags=["notifications"])
    def render_notification(request: NotificationRequest) -> Response:
        try:
            payload = _toaster.build(request.to_notification())
        except InvalidDurationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except TemplateError as exc:
            logger.error("通知模板渲染失败", exc_info=True)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return Response(content=payload, media_type="text/plain; charset=utf-8")

    return app
