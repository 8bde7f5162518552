"""
Offers for the reward programs (free credit, referral, partner).
Models and errors are plain values; storage goes through the OffersDB contract.
"""
from app.rewards.db import OffersDB
from app.rewards.errors import (
    OfferNotExistError,
    OfferReachedMaxCapacityError,
    RewardsError,
)
from app.rewards.memory import MemoryOffersDB
from app.rewards.models import (
    NewOffer,
    Offer,
    Offers,
    OfferStatus,
    OfferType,
    RedeemOffer,
    UpdateOffer,
)

__all__ = [
    "MemoryOffersDB",
    "NewOffer",
    "Offer",
    "OfferNotExistError",
    "OfferReachedMaxCapacityError",
    "Offers",
    "OfferStatus",
    "OfferType",
    "OffersDB",
    "RedeemOffer",
    "RewardsError",
    "UpdateOffer",
]
