"""FileStorage that writes below a local directory."""

from __future__ import annotations

import logging
from pathlib import Path

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.repository.file_storage import FileStorage

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):

    def __init__(self, root: Path, public_base_url: str) -> None:
        self._root = root
        self._public_base_url = public_base_url.rstrip("/")

    def upload(self, name: str, data: bytes, content_type: str) -> str:
        target = self._root / name
        if target.exists():
            raise ValidationError(f"File '{name}' already exists")
        self._root.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.info("Stored %s (%d bytes, %s)", name, len(data), content_type)
        return f"{self._public_base_url}/{name}"
