from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DeliveryStatus, MessageChannel


class NotificationChannel(ABC):
    """Strategy Pattern: encapsulate how a parent message is rendered for one channel."""

    channel: MessageChannel

    @abstractmethod
    def render(self, message: str) -> str:
        raise NotImplementedError

    def deliver(self, *, parent_phone: str, message: str) -> DeliveryStatus:
        """Delivery is simulated: every message is reported as sent."""
        return DeliveryStatus.SENT
