"""Data models for URL shortener."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class URLMapping:
    """Represents a stored short code -> URL mapping.

    Mappings are immutable: nothing in the service updates or deletes one
    after it has been inserted.
    """

    short_code: str
    original_url: str
    created_at: datetime = field(default_factory=_utcnow)

    def to_document(self) -> Dict[str, Any]:
        """Convert to a MongoDB document."""
        return {
            "shortCode": self.short_code,
            "originalUrl": self.original_url,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "URLMapping":
        """Create from a MongoDB document."""
        created_at = data.get("createdAt") or _utcnow()
        if created_at.tzinfo is None:
            # PyMongo returns naive UTC datetimes unless tz_aware is set
            created_at = created_at.replace(tzinfo=timezone.utc)

        return cls(
            short_code=data["shortCode"],
            original_url=data["originalUrl"],
            created_at=created_at,
        )
