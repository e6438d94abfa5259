from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import DocumentCategory


@dataclass(frozen=True)
class DocumentItem:
    id: str
    title: str
    category: DocumentCategory
    uploaded_by: str
    date: date
    size: str
    type: str
    url: Optional[str] = None
    # Uploaded bytes stay in memory only.
    content: Optional[bytes] = field(default=None, repr=False, compare=False)
