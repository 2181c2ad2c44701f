"""Runtime settings read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
ROOT_DIR = Path(__file__).resolve().parents[3]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    upload_dir: Path
    public_base_url: str
    currency: str
    store_name: str
    low_stock_threshold: int
    catalog_cache_ttl: float
    persist_cart: bool
    checkout_delay: float
    checkout_failure_rate: float
    max_upload_bytes: int
    log_level: str


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from *env*, or from ``os.environ`` after reading ``.env``."""
    if env is None:
        load_dotenv(dotenv_path=ROOT_DIR / ".env")
        env = os.environ

    data_dir = Path(_get(env, "FRESHCART_DATA_DIR", default=str(ROOT_DIR / "data")))
    upload_dir = Path(_get(env, "FRESHCART_UPLOAD_DIR", default=str(data_dir / "uploads")))

    failure_rate = _get_float(env, "FRESHCART_CHECKOUT_FAILURE_RATE", 0.0)
    if not 0.0 <= failure_rate <= 1.0:
        raise ValueError("FRESHCART_CHECKOUT_FAILURE_RATE must be between 0 and 1")

    return Settings(
        data_dir=data_dir,
        upload_dir=upload_dir,
        public_base_url=_get(env, "FRESHCART_PUBLIC_BASE_URL", default=upload_dir.as_uri()),
        currency=_get(env, "FRESHCART_CURRENCY", default="USD").upper(),
        store_name=_get(env, "FRESHCART_STORE_NAME", default="FreshCart Organic Market"),
        low_stock_threshold=_get_int(env, "FRESHCART_LOW_STOCK_THRESHOLD", 10),
        catalog_cache_ttl=_get_float(env, "FRESHCART_CATALOG_CACHE_TTL", 300.0),
        persist_cart=_get_bool(env, "FRESHCART_PERSIST_CART", True),
        checkout_delay=_get_float(env, "FRESHCART_CHECKOUT_DELAY", 1.0),
        checkout_failure_rate=failure_rate,
        max_upload_bytes=_get_int(env, "FRESHCART_MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
        log_level=_get(env, "FRESHCART_LOG_LEVEL", default="WARNING").upper(),
    )


def _get(env: Mapping[str, str], key: str, default: str) -> str:
    value = env.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = _get(env, key, default=str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = _get(env, key, default=str(default))
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def _get_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = _get(env, key, default=str(default)).lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")
