from __future__ import annotations

from typing import Optional

from ..common.permissions import require_staff
from ..common.validators import require_non_empty
from ..core.constants import MAX_DOCUMENT_BYTES
from ..core.enums import DocumentCategory
from ..core.exceptions import ValidationError
from ..store.store import SchoolStore
from ..users.model import SessionUser
from .model import DocumentItem


def size_label(num_bytes: int) -> str:
    return f"{num_bytes / 1024 / 1024:.2f} MB"


def file_type(filename: str) -> str:
    _, dot, ext = filename.rpartition(".")
    return ext if dot and ext else "file"


class DocumentService:
    """Document repository. Uploads are held in memory; nothing is written to disk."""

    def __init__(self, store: SchoolStore, *, max_bytes: int = MAX_DOCUMENT_BYTES):
        self._store = store
        self._max_bytes = int(max_bytes)

    def upload(
        self,
        *,
        user: SessionUser,
        filename: str,
        content: bytes,
        category: Optional[str] = None,
    ) -> DocumentItem:
        require_staff(user.role)

        title = require_non_empty(filename, "file")
        if len(content) > self._max_bytes:
            raise ValidationError("file_too_large", limit_mb=self._max_bytes // (1024 * 1024))

        try:
            doc_category = DocumentCategory(category) if category else DocumentCategory.MATERIAL
        except ValueError:
            raise ValidationError("field_required", field="category")

        document = DocumentItem(
            id=self._store.new_id(),
            title=title,
            category=doc_category,
            uploaded_by=user.name or "Unknown",
            date=self._store.today(),
            size=size_label(len(content)),
            type=file_type(title),
            content=content,
        )
        self._store.add_document(document)
        return document

    def search(self, term: str = "") -> list[DocumentItem]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._store.documents)
        return [
            d for d in self._store.documents if needle in d.title.lower() or needle in d.category.value.lower()
        ]
