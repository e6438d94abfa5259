from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus
from .channels.base import NotificationChannel
from .channels.sms_channel import SmsChannel
from .channels.voice_note_channel import VoiceNoteChannel


@dataclass
class NotificationChannelFactory:
    """Factory Pattern: choose which channels fire for an attendance status."""

    def for_status(self, status: AttendanceStatus) -> list[NotificationChannel]:
        if status == AttendanceStatus.ABSENT:
            return [SmsChannel(), VoiceNoteChannel()]
        return []
