"""Loyalty programme rules: statuses, discounts and reservation counting."""

from dataclasses import replace

from ..errs import InvalidContentError
from ..models import Loyalty

BRONZE = "BRONZE"
SILVER = "SILVER"
GOLD = "GOLD"

_DISCOUNTS = {BRONZE: 5, SILVER: 7, GOLD: 10}


def get_status(reservation_count: int) -> str:
    """Status earned by the given number of reservations."""
    if reservation_count < 0:
        raise InvalidContentError("reservation count cannot be negative")
    if reservation_count < 10:
        return BRONZE
    if reservation_count < 20:
        return SILVER
    return GOLD


def get_discount(status: str) -> int:
    """Discount percentage granted by a status."""
    try:
        return _DISCOUNTS[status]
    except KeyError:
        raise InvalidContentError(f"unknown status: {status!r}") from None


class LoyaltyUseCase:
    def __init__(self, repo) -> None:
        self._repo = repo

    def create(self, loyalty: Loyalty) -> Loyalty:
        """Create a record with the starting discount."""
        return self._repo.create(replace(loyalty, discount=get_discount(BRONZE)))

    def update_res_count_by_one(self, loyalty: Loyalty) -> Loyalty:
        """Move the user's reservation count one step in the sign of loyalty.reservation_count."""
        if not loyalty.username or loyalty.reservation_count == 0:
            raise InvalidContentError("username and a non-zero reservation count are required")

        found = self._repo.get_by_username(loyalty.username)

        if loyalty.reservation_count > 0:
            found.reservation_count += 1
        else:
            if found.reservation_count == 0:
                return found
            found.reservation_count -= 1
        fields = {"reservation_count"}

        status = get_status(found.reservation_count)
        if found.status != status:
            found.status = status
            found.discount = get_discount(status)
            fields |= {"status", "discount"}

        return self._repo.update(found, fields)

    def get_by_username(self, username: str) -> Loyalty:
        return self._repo.get_by_username(username)