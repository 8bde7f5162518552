"""Tests for the JSON log formatter."""
import json
import logging

from app.core.logging import JsonFormatter


def _record(**extra):
    record = logging.LogRecord("app.rewards.memory", logging.INFO, __file__, 1, "offer_created", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_whitelisted_extra():
    payload = json.loads(JsonFormatter().format(_record(offer_id=3, offer_type="REFERRAL", secret="x")))
    assert payload["message"] == "offer_created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.rewards.memory"
    assert payload["offer_id"] == 3
    assert payload["offer_type"] == "REFERRAL"
    assert "secret" not in payload


def test_formats_domain_values():
    from datetime import datetime, timezone

    from app.rewards.models import OfferStatus, OfferType
    from app.utils.currency import USD

    payload = json.loads(
        JsonFormatter().format(
            _record(
                offer_type=OfferType.REFERRAL,
                offer_status=OfferStatus.ACTIVE,
                expires_at=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
                award_credit=USD.from_cents(1050),
            )
        )
    )
    assert payload["offer_type"] == "REFERRAL"
    assert payload["offer_status"] == "ACTIVE"
    assert payload["expires_at"] == "2026-03-01T12:00:00+00:00"
    assert payload["award_credit"] == "$10.50"
