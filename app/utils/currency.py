"""USD amounts in whole cents, plus display formatting."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class USD(BaseModel):
    """Opaque currency amount. The zero value is USD()."""

    cents: int = 0

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _coerce_cents(cls, data: Any) -> Any:
        # Seed files store plain integers (cents).
        if isinstance(data, int) and not isinstance(data, bool):
            return {"cents": data}
        return data

    @classmethod
    def from_cents(cls, cents: int) -> USD:
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: float) -> USD:
        return cls(cents=int(round(dollars * 100)))

    @property
    def dollars(self) -> float:
        return self.cents / 100

    def is_zero(self) -> bool:
        return self.cents == 0

    def __str__(self) -> str:
        return format_usd(self)


def format_usd(amount: USD, symbol: str = "$") -> str:
    """Render as "$1.50" ("-$1.50" for negative amounts)."""
    sign = "-" if amount.cents < 0 else ""
    whole, frac = divmod(abs(amount.cents), 100)
    return f"{sign}{symbol}{whole}.{frac:02d}"
