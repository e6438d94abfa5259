from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import DeliveryStatus, MessageChannel


@dataclass(frozen=True)
class CommunicationLog:
    """A message sent to a parent; never mutated once logged."""

    id: str
    student_name: str
    parent_phone: str
    message: str
    type: MessageChannel
    timestamp: datetime
    status: DeliveryStatus
