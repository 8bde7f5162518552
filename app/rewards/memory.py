"""
MemoryOffersDB — process-local OffersDB: offers live in a dict keyed by id.
Used by tests and developer scripts in place of a real database.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from app.rewards.errors import OfferNotExistError, RewardsError
from app.rewards.models import NewOffer, Offer, Offers, OfferStatus, OfferType, as_utc

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryOffersDB:
    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        self._offers: dict[int, Offer] = {}
        self._next_id = 1

    def list_all(self) -> Offers:
        with self._lock:
            return [self._offers[offer_id] for offer_id in sorted(self._offers)]

    def get_active_offers_by_type(self, offer_type: OfferType) -> Offers:
        """Active offers of one type, newest first."""
        with self._lock:
            offers = [
                offer
                for offer in self._offers.values()
                if offer.status == OfferStatus.ACTIVE and offer.type == offer_type
            ]
        offers.sort(key=lambda o: (o.created_at, o.id), reverse=True)
        return offers

    def create(self, new_offer: NewOffer) -> Offer:
        if new_offer.is_empty():
            raise RewardsError("offer name is required")

        now = as_utc(self._clock())
        with self._lock:
            offer = Offer(
                id=self._next_id,
                created_at=now,
                **new_offer.model_dump(),
            )
            self._offers[offer.id] = offer
            self._next_id += 1

        logger.info(
            "offer_created",
            extra={
                "offer_id": offer.id,
                "offer_type": offer.type,
                "offer_status": offer.status,
                "offer_name": offer.name,
                "award_credit": offer.award_credit,
                "expires_at": offer.expires_at,
            },
        )
        return offer

    def finish(self, offer_id: int) -> None:
        now = as_utc(self._clock())
        with self._lock:
            offer = self._offers.get(offer_id)
            if offer is None:
                logger.warning("offer_finish_missing", extra={"offer_id": offer_id})
                raise OfferNotExistError(f"offer id {offer_id}")

            update = {"status": OfferStatus.DONE}
            if offer.expires_at is None or offer.expires_at > now:
                update["expires_at"] = now
            finished = offer.model_copy(update=update)
            self._offers[offer_id] = finished

        logger.info(
            "offer_finished",
            extra={"offer_id": offer_id, "offer_type": finished.type, "expires_at": finished.expires_at},
        )
