from __future__ import annotations

from ...core.constants import VOICE_NOTE_DURATION
from ...core.enums import MessageChannel
from .base import NotificationChannel


class VoiceNoteChannel(NotificationChannel):
    """Text-to-speech rendering of the message, tagged with the channel and clip duration."""

    channel = MessageChannel.VOICE_NOTE

    def __init__(self, duration: str = VOICE_NOTE_DURATION):
        self._duration = duration

    def render(self, message: str) -> str:
        return f"[{self.channel.value}] {message} ({self._duration})"
