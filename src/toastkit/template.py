"""将通知渲染为 PowerShell 脚本。"""

from __future__ import annotations

import jinja2

from toastkit.errors import TemplateError
from toastkit.notification import Duration, Notification

DEFAULT_APP_ID = "Windows App"
UTF8_BOM = b"\xef\xbb\xbf"

# 属性值原样写入，调用方需自行保证不含引号
TOAST_TEMPLATE = """
[Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null
[Windows.UI.Notifications.ToastNotification, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null
[Windows.Data.Xml.Dom.XmlDocument, Windows.Data.Xml.Dom.XmlDocument, ContentType = WindowsRuntime] | Out-Null

$APP_ID = '{{ app_id }}'

$template = @"
<toast activationType="{{ activation_type }}" launch="{{ activation_arguments }}" duration="{{ duration }}">
    <visual>
        <binding template="ToastGeneric">
            {% if icon %}
            <image placement="appLogoOverride" src="{{ icon }}" />
            {% endif %}
            {% if title %}
            <text><![CDATA[{{ title }}]]></text>
            {% endif %}
            {% if message %}
            <text><![CDATA[{{ message }}]]></text>
            {% endif %}
        </binding>
    </visual>
    <audio src="ms-winsoundevent:Notification.Default" loop="false" />
    {% if actions %}
    <actions>
        {% for action in actions %}
        <action activationType="{{ action.type }}" content="{{ action.label }}" arguments="{{ action.arguments }}" />
        {% endfor %}
    </actions>
    {% endif %}
</toast>
"@

$xml = New-Object Windows.Data.Xml.Dom.XmlDocument
$xml.LoadXml($template)
$toast = New-Object Windows.UI.Notifications.ToastNotification $xml
[Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier($APP_ID).Show($toast)
"""


def _build_template(source: str = TOAST_TEMPLATE) -> jinja2.Template:
    environment = jinja2.Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    return environment.from_string(source)


_TEMPLATE = _build_template()


def render(notification: Notification, default_app_id: str = DEFAULT_APP_ID) -> bytes:
    """渲染通知脚本，返回带 UTF-8 BOM 的字节串。

    期望输入已经过 `prepare` 处理，但 AppID 的默认值在这里单独补全。
    """

    duration = notification.duration
    if isinstance(duration, Duration):
        duration = duration.value

    context = {
        "app_id": notification.app_id or default_app_id,
        "title": notification.title,
        "message": notification.message,
        "icon": notification.icon,
        "activation_type": notification.activation_type,
        "activation_arguments": notification.activation_arguments,
        "duration": duration,
        "actions": list(notification.actions),
    }

    try:
        script = _TEMPLATE.render(**context)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"rendering toast template: {exc}") from exc

    try:
        body = script.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise TemplateError(f"encoding toast script: {exc}") from exc

    return UTF8_BOM + body
