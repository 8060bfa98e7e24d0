from datetime import datetime, timezone
import uuid

from medcase.core.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


__all__ = ["Base", "generate_id", "utcnow"]
