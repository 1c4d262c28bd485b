"""Shared helpers for model identifiers and timestamps."""
from datetime import datetime, timezone
import uuid


def utcnow() -> datetime:
    """
    Current time as a naive UTC datetime

    Every timestamp column is declared as a timezone-naive ``DateTime``
    and holds UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id(prefix: str) -> str:
    """Generate an opaque identifier such as ``task-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
