"""Tests for loading offers from a JSON seed file."""
import json

import pytest
from pydantic import ValidationError

from app.rewards import MemoryOffersDB, OfferStatus, OfferType, RewardsError
from app.rewards.seed import load_offers_file, parse_new_offers
from app.utils.currency import USD


def test_load_offers_file(tmp_path):
    path = tmp_path / "offers.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Free", "invitee_credit": 5500, "status": 2, "type": 1},
                {"name": "Partner", "award_credit": 100, "status": 1, "type": 3},
            ]
        ),
        encoding="utf-8",
    )
    db = MemoryOffersDB()

    created = load_offers_file(db, path)

    assert [o.id for o in created] == [1, 2]
    assert created[0].invitee_credit == USD.from_cents(5500)
    assert created[1].status is OfferStatus.DEFAULT
    assert [o.name for o in db.get_active_offers_by_type(OfferType.FREE_CREDIT)] == ["Free"]


def test_parse_rejects_unknown_type():
    with pytest.raises(ValidationError):
        parse_new_offers('[{"name": "x", "type": 9}]')


def test_bad_entry_leaves_store_empty(tmp_path):
    path = tmp_path / "offers.json"
    path.write_text(json.dumps([{"name": "ok"}, {"name": ""}]), encoding="utf-8")
    db = MemoryOffersDB()

    with pytest.raises(RewardsError) as exc:
        load_offers_file(db, path)

    assert "seed entry 1" in str(exc.value)
    assert db.list_all() == []
