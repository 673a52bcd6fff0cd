"""Storage of shortened URLs in a SQL database."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import closing
from typing import Any, Protocol

from .models import URLEntity, URLFilter

_INSERT_URL = "INSERT INTO url (user_id, original_url, created_at) VALUES (%s, %s, NOW())"
_UPDATE_URL = "UPDATE url SET short_url = %s, original_url = %s, updated_at = NOW() WHERE id = %s"
_SELECT_URL = (
    "SELECT id, user_id, short_url, original_url, created_at, updated_at FROM url WHERE true"
)
_COLUMNS = ("id", "user_id", "short_url", "original_url", "created_at", "updated_at")


class URLRepository(Protocol):
    """Persistent store of URL entities."""

    def create(self, entity: URLEntity) -> URLEntity: ...

    def update(self, entity: URLEntity) -> URLEntity: ...

    def get(self, url_filter: URLFilter) -> URLEntity | None: ...


def _entity_from_row(row: Sequence[Any] | Mapping[str, Any]) -> URLEntity:
    if isinstance(row, Mapping):
        values = dict(row)
    else:
        values = dict(zip(_COLUMNS, row))
    return URLEntity(
        id=int(values["id"]),
        user_id=int(values["user_id"] or 0),
        short_url=values["short_url"] or "",
        original_url=values["original_url"] or "",
        created_at=values["created_at"],
        updated_at=values["updated_at"],
    )


class SQLURLRepository:
    """URL store over a DB-API connection using the %s parameter style."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def _execute(self, query: str, params: Sequence[Any]) -> int | None:
        with closing(self._connection.cursor()) as cursor:
            cursor.execute(query, tuple(params))
            last_id = cursor.lastrowid
        self._connection.commit()
        return last_id

    def create(self, entity: URLEntity) -> URLEntity:
        """Insert the entity and set its id to the one the database assigned."""
        last_id = self._execute(_INSERT_URL, (entity.user_id, entity.original_url))
        if last_id is None:
            raise RuntimeError("database did not report the inserted id")
        entity.id = int(last_id)
        return entity

    def update(self, entity: URLEntity) -> URLEntity:
        """Store the entity's short and original URL under its id."""
        self._execute(_UPDATE_URL, (entity.short_url, entity.original_url, entity.id))
        return entity

    def get(self, url_filter: URLFilter) -> URLEntity | None:
        """Return the first entity matching the filter, or None."""
        query = _SELECT_URL
        params: list[Any] = []
        if url_filter.id:
            query += " AND id = %s"
            params.append(url_filter.id)
        if url_filter.short_url:
            query += " AND short_url = %s"
            params.append(url_filter.short_url)

        with closing(self._connection.cursor()) as cursor:
            cursor.execute(query, tuple(params))
            row = cursor.fetchone()
        if row is None:
            return None
        return _entity_from_row(row)