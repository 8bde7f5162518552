#!/usr/bin/env python3
"""
Load offers from the seed file (OFFERS_SEED_FILE or first argument) and print them.
Run from the project root: python -m scripts.print_offers [path]
or: PYTHONPATH=. python scripts/print_offers.py [path]
"""
import os
import sys

# project root on PYTHONPATH
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.logging import configure_logging
from app.rewards import MemoryOffersDB, OfferType
from app.rewards.config import get_currency_symbol, get_seed_file
from app.rewards.seed import load_offers_file
from app.utils.currency import format_usd


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else get_seed_file()
    if not path:
        print("OFFERS_SEED_FILE is not set and no path given.")
        return 1

    configure_logging()
    db = MemoryOffersDB()
    load_offers_file(db, path)

    offers = db.list_all()
    if not offers:
        print("Seed file has no offers.")
        return 0

    symbol = get_currency_symbol()
    for offer in offers:
        print(
            f"  #{offer.id} {offer.name} [{offer.type.name} / {offer.status.name}]\n"
            f"    award {format_usd(offer.award_credit, symbol)} for {offer.award_credit_duration_days}d, "
            f"invitee {format_usd(offer.invitee_credit, symbol)} for {offer.invitee_credit_duration_days}d, "
            f"cap {offer.redeemable_cap}\n"
        )

    for offer_type in (OfferType.FREE_CREDIT, OfferType.REFERRAL, OfferType.PARTNER):
        active = db.get_active_offers_by_type(offer_type)
        current = active[0].name if active else "-"
        print(f"  current {offer_type.name}: {current}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
