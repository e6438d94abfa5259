from __future__ import annotations

from ...core.enums import MessageChannel
from .base import NotificationChannel


class SmsChannel(NotificationChannel):
    """Plain text message, sent verbatim."""

    channel = MessageChannel.SMS

    def render(self, message: str) -> str:
        return message
