from __future__ import annotations

from typing import Optional

from ..common.permissions import require_staff
from ..common.validators import require_non_empty
from ..core.enums import NoticeType
from ..core.exceptions import NotFoundError, ValidationError
from ..store.store import SchoolStore
from ..users.model import SessionUser
from .model import Notice


class NoticeService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def post(self, *, user: SessionUser, title: str, message: str, notice_type: Optional[str] = None) -> Notice:
        require_staff(user.role)

        title = require_non_empty(title, "title")
        message = require_non_empty(message, "message")
        try:
            kind = NoticeType(notice_type) if notice_type else NoticeType.INFO
        except ValueError:
            raise ValidationError("invalid_status")

        notice = Notice(
            id=self._store.new_id(),
            title=title,
            message=message,
            date=self._store.today(),
            type=kind,
            posted_by=user.name or "Staff",
        )
        self._store.add_notice(notice)
        return notice

    def delete(self, *, user: SessionUser, notice_id: str) -> None:
        require_staff(user.role)

        if not any(n.id == notice_id for n in self._store.notices):
            raise NotFoundError("notice_not_found")
        self._store.delete_notice(notice_id)

    def list_all(self) -> list[Notice]:
        return list(self._store.notices)
