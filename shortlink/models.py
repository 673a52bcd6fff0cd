"""Records stored by the service and the shapes of its requests and replies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass
class URLEntity:
    """A row of the url table."""

    id: int = 0
    user_id: int = 0
    short_url: str = ""
    original_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class URLFilter:
    """Conditions for looking up a URL; zero or empty fields are ignored."""

    id: int = 0
    short_url: str = ""


def _format_time(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


@dataclass
class GetURLResponse:
    """The public view of a shortened URL."""

    short_url: str
    original_url: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, entity: URLEntity) -> GetURLResponse:
        return cls(
            short_url=entity.short_url,
            original_url=entity.original_url,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; updated_at is left out while it is unset."""
        data: dict[str, Any] = {
            "short_url": self.short_url,
            "original_url": self.original_url,
            "created_at": _format_time(self.created_at),
        }
        if self.updated_at is not None:
            data["updated_at"] = _format_time(self.updated_at)
        return data


@dataclass
class CreateURLRequest:
    """A request to shorten a URL."""

    original_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CreateURLRequest:
        """Build a request from decoded JSON, raising ValueError on a bad shape."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        original_url = data.get("original_url")
        if original_url is None:
            return cls()
        if not isinstance(original_url, str):
            raise ValueError("original_url must be a string")
        return cls(original_url=original_url)