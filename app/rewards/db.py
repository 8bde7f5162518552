"""
OffersDB — the storage contract for offers.

Implementations are bound to their connection/session when constructed,
so the methods take only the call arguments.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from app.rewards.models import NewOffer, Offer, Offers, OfferType


@runtime_checkable
class OffersDB(Protocol):
    def list_all(self) -> Offers:
        """Return every offer ordered by id."""
        ...

    def get_active_offers_by_type(self, offer_type: OfferType) -> Offers:
        """Return active offers of the given type."""
        ...

    def create(self, new_offer: NewOffer) -> Offer:
        """Store a new offer and return it with id and created_at filled in."""
        ...

    def finish(self, offer_id: int) -> None:
        """Mark the offer as done. Raises OfferNotExistError for an unknown id."""
        ...
