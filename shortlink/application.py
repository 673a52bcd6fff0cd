"""Creating short URLs and resolving them back to the original address."""

from __future__ import annotations

import logging

from .errors import CustomError, ErrorType
from .models import CreateURLRequest, GetURLResponse, URLEntity, URLFilter
from .repository import URLRepository

logger = logging.getLogger(__name__)

BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
MIN_SHORT_URL_LENGTH = 5


def encode_base62(number: int) -> str:
    """Encode a non-negative integer in base 62, left-padded with '0' to five characters."""
    if number < 0:
        raise ValueError("number must not be negative")
    base = len(BASE62_ALPHABET)
    digits: list[str] = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(BASE62_ALPHABET[remainder])
    encoded = "".join(reversed(digits))
    return encoded.rjust(MIN_SHORT_URL_LENGTH, BASE62_ALPHABET[0])


def _normalize_url(url: str) -> str:
    if url.startswith(("http://", "https://")):
        return url
    return "https://" + url


class URLApplication:
    """Business rules of the shortener on top of a URL repository."""

    def __init__(self, repository: URLRepository) -> None:
        self.repository = repository

    def create_short_url(self, request: CreateURLRequest) -> GetURLResponse:
        """Store the URL and return it with its base 62 short form."""
        original_url = _normalize_url(request.original_url)

        try:
            created = self.repository.create(URLEntity(user_id=0, original_url=original_url))
        except Exception as exc:
            logger.error("[create_short_url] err create: %s", exc)
            raise CustomError(ErrorType.INTERNAL) from exc

        created.short_url = encode_base62(created.id)

        try:
            updated = self.repository.update(created)
        except Exception as exc:
            logger.error("[create_short_url] err update: %s", exc)
            raise CustomError(ErrorType.INTERNAL) from exc

        return GetURLResponse.from_entity(updated)

    def get_by_short_url(self, short_url: str) -> GetURLResponse:
        """Look up a short URL, raising CustomError when it is unknown or lookup fails."""
        try:
            entity = self.repository.get(URLFilter(short_url=short_url))
        except Exception as exc:
            logger.error("[get_by_short_url] err get: %s", exc)
            raise CustomError(ErrorType.INTERNAL) from exc

        if entity is None:
            raise CustomError(ErrorType.NOT_FOUND)
        return GetURLResponse.from_entity(entity)