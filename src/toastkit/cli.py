"""命令行入口：推送通知、预览脚本或启动本地 HTTP 服务。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from toastkit.config import AppConfig
from toastkit.errors import ExecutorError, InvalidDurationError, TemplateError, ToastError
from toastkit.notification import Action, Notification
from toastkit.service import Toaster

app = typer.Typer(help="渲染并弹出 Windows toast 通知。")

EXIT_CODES = {
    InvalidDurationError: 3,
    TemplateError: 4,
    ExecutorError: 5,
}

_state: dict[str, AppConfig] = {}


@app.callback()
def entry(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="JSON 配置文件，缺省时读取 config.local.py 或默认配置。",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志。"),
) -> None:
    app_config = AppConfig.from_file(config) if config is not None else AppConfig.load()
    level = "DEBUG" if verbose else app_config.log_level
    logging.basicConfig(level=level, format="[%(asctime)s][%(levelname)s] %(name)s: %(message)s")
    _state["config"] = app_config


def _config() -> AppConfig:
    return _state.get("config") or AppConfig.load_default()


def parse_action(value: str) -> Action:
    """解析 `TYPE|LABEL|ARGS` 形式的按钮定义。"""

    parts = value.split("|", 2)
    if len(parts) < 2:
        raise typer.BadParameter(f"expected TYPE|LABEL[|ARGS], got {value!r}")
    while len(parts) < 3:
        parts.append("")
    return Action(parts[0], parts[1], parts[2])


def _build_notification(
    app_id: str,
    title: str,
    message: str,
    icon: str,
    activation_type: str,
    launch: str,
    duration: str,
    actions: Optional[List[str]],
) -> Notification:
    return Notification(
        app_id=app_id,
        title=title,
        message=message,
        icon=icon,
        activation_type=activation_type,
        activation_arguments=launch,
        duration=duration,
        actions=[parse_action(item) for item in actions or []],
    )


def _fail(exc: ToastError) -> None:
    typer.echo(f"{exc.stage} failed: {exc}", err=True)
    raise typer.Exit(code=EXIT_CODES.get(type(exc), 1))


AppIdOption = typer.Option("", "--app-id", help="操作中心显示的应用名。")
TitleOption = typer.Option("", "--title", "-t", help="通知标题。")
MessageOption = typer.Option("", "--message", "-m", help="通知正文。")
IconOption = typer.Option("", "--icon", help="图标的绝对路径。")
ActivationTypeOption = typer.Option("", "--activation-type", help="点击行为类型，默认 protocol。")
LaunchOption = typer.Option("", "--launch", help="点击时传递的参数，例如 URI。")
DurationOption = typer.Option("", "--duration", "-d", help="停留时长：short 或 long。")
ActionOption = typer.Option(None, "--action", "-a", help="按钮，格式 TYPE|LABEL|ARGS，可重复。")


@app.command()
def push(
    app_id: str = AppIdOption,
    title: str = TitleOption,
    message: str = MessageOption,
    icon: str = IconOption,
    activation_type: str = ActivationTypeOption,
    launch: str = LaunchOption,
    duration: str = DurationOption,
    action: Optional[List[str]] = ActionOption,
    dry_run: bool = typer.Option(False, "--dry-run", help="只渲染，不启动 PowerShell。"),
) -> None:
    """弹出一条通知。"""

    config = _config()
    if dry_run:
        config = config.model_copy(update={"dry_run": True})
    notification = _build_notification(app_id, title, message, icon, activation_type, launch, duration, action)

    try:
        Toaster(config=config).push(notification)
    except ToastError as exc:
        _fail(exc)

    typer.echo("dry run: notification rendered" if config.dry_run else "notification sent")


@app.command()
def render(
    app_id: str = AppIdOption,
    title: str = TitleOption,
    message: str = MessageOption,
    icon: str = IconOption,
    activation_type: str = ActivationTypeOption,
    launch: str = LaunchOption,
    duration: str = DurationOption,
    action: Optional[List[str]] = ActionOption,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="写入文件而不是标准输出。"),
) -> None:
    """输出生成的 PowerShell 脚本。"""

    config = _config().model_copy(update={"dry_run": True})
    notification = _build_notification(app_id, title, message, icon, activation_type, launch, duration, action)

    try:
        payload = Toaster(config=config).build(notification)
    except ToastError as exc:
        _fail(exc)
        return

    if output is not None:
        output.write_bytes(payload)
        typer.echo(f"script written to {output}")
    else:
        typer.echo(payload, nl=False)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="监听地址。"),
    port: Optional[int] = typer.Option(None, "--port", help="监听端口。"),
) -> None:
    """启动 HTTP 服务。"""

    import uvicorn

    from toastkit.api import create_app

    config = _config()
    api = create_app(Toaster(config=config))
    uvicorn.run(api, host=host or config.api_host, port=port or config.api_port)


if __name__ == "__main__":
    app()
