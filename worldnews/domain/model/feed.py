"""Dual-country feed selection."""

from enum import Enum

from worldnews.domain.model.common import DomainModel
from worldnews.domain.value import CountryCode


class FeedSlot(str, Enum):
    """Column of the comparison feed."""

    LEFT = "left"
    RIGHT = "right"


class FeedSelection(DomainModel):
    """The two countries shown side by side."""

    left: CountryCode = CountryCode.US
    right: CountryCode = CountryCode.UK

    def select(self, slot: FeedSlot, country: CountryCode) -> "FeedSelection":
        """Put a country in a slot.

        Choosing the country already shown in the other slot is a no-op and
        returns the selection unchanged.
        """
        other = self.right if slot == FeedSlot.LEFT else self.left
        if country == other:
            return self
        return self.model_copy(update={slot.value: country})
