"""
Rewards config — typed wrappers over app.core.config.settings.
"""
from __future__ import annotations

from app.core.config import settings


def get_seed_file() -> str | None:
    path = (settings.offers_seed_file or "").strip()
    return path or None


def get_currency_symbol() -> str:
    return settings.offers_currency_symbol
