"""Abstract binary storage for uploaded product images."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileStorage(ABC):

    @abstractmethod
    def upload(self, name: str, data: bytes, content_type: str) -> str:
        """Store *data* under *name* and return its public URL."""
