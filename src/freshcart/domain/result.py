"""Result values returned by store-level operations.

Store operations never raise for expected outcomes.  They hand back either a
``Success`` carrying a value or a ``Failure`` with a machine-readable kind and
a human message, and the presentation layer decides how to show it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: str  # "validation" | "transient" | "not_found"
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success, Failure]
