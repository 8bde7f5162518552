"""
Load offers from a JSON seed file into an OffersDB.

File format: a JSON array of objects with NewOffer fields; credit amounts
are integer cents, enums are their integer values.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from app.rewards.db import OffersDB
from app.rewards.errors import RewardsError
from app.rewards.models import NewOffer, Offers

logger = logging.getLogger(__name__)

_new_offers_adapter = TypeAdapter(list[NewOffer])


def parse_new_offers(raw: str) -> list[NewOffer]:
    """Validate a JSON array into NewOffer objects. Raises pydantic.ValidationError."""
    return _new_offers_adapter.validate_python(json.loads(raw))


def load_offers_file(db: OffersDB, path: str | Path) -> Offers:
    """Create every offer from the seed file, in file order.

    The whole file is checked first: a bad entry leaves the store untouched.
    """
    new_offers = parse_new_offers(Path(path).read_text(encoding="utf-8"))
    for index, new_offer in enumerate(new_offers):
        if new_offer.is_empty():
            raise RewardsError(f"seed entry {index} has no name")
    created = [db.create(new_offer) for new_offer in new_offers]
    logger.info("offers_seeded", extra={"path": str(path), "count": len(created)})
    return created
