from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque 9-character record id."""
    return uuid.uuid4().hex[:9]
