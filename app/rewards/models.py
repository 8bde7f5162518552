"""
Offer DTOs: Offer (canonical record), NewOffer (create input),
UpdateOffer (partial update), RedeemOffer (capacity check input).
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum

from pydantic import BaseModel, Field, field_validator

from app.utils.currency import USD


class OfferType(IntEnum):
    """Program an offer belongs to."""

    # Offers without a correct type associated with them
    INVALID = 0
    # Free Credit Program
    FREE_CREDIT = 1
    # Referral Program
    REFERRAL = 2
    # Open Source Partner Program
    PARTNER = 3


class OfferStatus(IntEnum):
    """Stage of an offer in its life-cycle."""

    # No longer in use
    DONE = 0
    # Used when there is no active offer
    DEFAULT = 1
    # Currently in use
    ACTIVE = 2

    def is_default(self) -> bool:
        return self is OfferStatus.DEFAULT


def as_utc(value: datetime | None) -> datetime | None:
    # naive timestamps are UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ----- Create input -----


class NewOffer(BaseModel):
    """Everything needed to create an offer; id and created_at are assigned by the store."""

    name: str = ""
    description: str = ""

    award_credit: USD = Field(default_factory=USD)
    invitee_credit: USD = Field(default_factory=USD)

    redeemable_cap: int = 0

    award_credit_duration_days: int = 0
    invitee_credit_duration_days: int = 0

    expires_at: datetime | None = None

    status: OfferStatus = OfferStatus.DONE
    type: OfferType = OfferType.INVALID

    model_config = {"frozen": True}

    @field_validator("expires_at")
    @classmethod
    def expires_at_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

    def is_empty(self) -> bool:
        return self.name == ""


class UpdateOffer(BaseModel):
    id: int
    status: OfferStatus
    expires_at: datetime | None = None

    model_config = {"frozen": True}

    @field_validator("expires_at")
    @classmethod
    def expires_at_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class RedeemOffer(BaseModel):
    redeemable_cap: int = 0
    status: OfferStatus = OfferStatus.DONE
    type: OfferType = OfferType.INVALID

    model_config = {"frozen": True}


# ----- Canonical record -----


class Offer(BaseModel):
    """Info needed for giving users free credits through the offer programs."""

    id: int = 0
    name: str = ""
    description: str = ""

    award_credit: USD = Field(default_factory=USD)
    invitee_credit: USD = Field(default_factory=USD)

    award_credit_duration_days: int = 0
    invitee_credit_duration_days: int = 0

    redeemable_cap: int = 0

    expires_at: datetime | None = None
    created_at: datetime | None = None

    status: OfferStatus = OfferStatus.DONE
    type: OfferType = OfferType.INVALID

    model_config = {"frozen": True}

    @field_validator("expires_at", "created_at")
    @classmethod
    def timestamps_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

    def is_empty(self) -> bool:
        """An offer without a name is treated as empty."""
        return self.name == ""

    def is_zero(self) -> bool:
        """True if every field holds its zero value."""
        return self == Offer()


Offers = list[Offer]
