"""Application service: Upload Product Image use case.

Validates an image, hands it to file storage and, when a product ID is
given, points that product at the stored image.
"""

from __future__ import annotations

import re
import time
from typing import Callable

from freshcart.application.catalog_cache import TtlCache
from freshcart.application.update_product import UpdateProductHandler
from freshcart.domain.exceptions import EntityNotFoundError, ValidationError
from freshcart.domain.repository.file_storage import FileStorage
from freshcart.domain.repository.product_repository import ProductRepository

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def storage_name(file_name: str, now_ms: int) -> str:
    """``<epoch millis>-<name without unsafe characters>``."""
    return f"{now_ms}-{_UNSAFE_CHARS.sub('', file_name)}"


class UploadProductImageHandler:

    def __init__(
        self,
        storage: FileStorage,
        product_repo: ProductRepository,
        max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        cache: TtlCache | None = None,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        self._storage = storage
        self._product_repo = product_repo
        self._max_bytes = max_bytes
        self._cache = cache
        self._clock_ms = clock_ms or (lambda: int(time.time() * 1000))

    def handle(
        self,
        file_name: str,
        data: bytes | None,
        content_type: str,
        product_id: str | None = None,
    ) -> str:
        """Store the image and return its public URL."""
        if not file_name or data is None:
            raise ValidationError("No file provided")
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise ValidationError("Invalid file type. Only JPEG, PNG and WebP are allowed.")
        if len(data) > self._max_bytes:
            limit_mb = self._max_bytes / (1024 * 1024)
            raise ValidationError(f"File size too large. Maximum size is {limit_mb:g}MB.")

        # Unknown product is rejected before anything is stored
        if product_id is not None and self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        url = self._storage.upload(
            storage_name(file_name, self._clock_ms()), data, content_type
        )
        if product_id is not None:
            UpdateProductHandler(self._product_repo, self._cache).handle(
                product_id, image_url=url
            )
        return url
