"""Rewards error classes."""


class RewardsError(Exception):
    """Base class for offer errors; subclasses override `message`."""

    message = "rewards error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class OfferReachedMaxCapacityError(RewardsError):
    """The offer's redemption count has hit its redeemable cap."""

    message = "offer redemption has reached its capacity"


class OfferNotExistError(RewardsError):
    message = "no current offer"
