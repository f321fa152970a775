# storefront/data/models/_time.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
