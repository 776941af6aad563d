"""Hotel business rules."""

from dataclasses import replace

from ..models import Hotel
from ..paging import Paging
from ..uuider import UUIDer


class HotelUseCase:
    """Creates and looks up hotels."""

    def __init__(self, repo, uuider: UUIDer) -> None:
        self._repo = repo
        self._uuider = uuider

    def create(self, hotel: Hotel) -> Hotel:
        """Store a hotel, generating a hotel uid when none is given."""
        if not hotel.hotel_uid:
            hotel = replace(hotel, hotel_uid=self._uuider.generate())
        return self._repo.create(hotel)

    def get_all_paged(self, paging: Paging) -> list[Hotel]:
        return self._repo.get_all_paged(paging)

    def get_by_id(self, hotel_id: int) -> Hotel:
        return self._repo.get_by_id(hotel_id)

    def get_by_uid(self, uid: str) -> Hotel:
        return self._repo.get_by_uid(uid)