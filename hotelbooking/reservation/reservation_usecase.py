"""Reservation business rules."""

from dataclasses import replace

from ..errs import ForbiddenError
from ..models import Reservation
from ..uuider import UUIDer


class ReservationUseCase:
    """Creates, looks up and cancels reservations."""

    def __init__(self, repo, uuider: UUIDer) -> None:
        self._repo = repo
        self._uuider = uuider

    def create(self, reservation: Reservation) -> Reservation:
        """Store a reservation, generating a reservation uid when none is given."""
        if not reservation.reservation_uid:
            reservation = replace(reservation, reservation_uid=self._uuider.generate())
        return self._repo.create(reservation)

    def get_by_username(self, username: str) -> list[Reservation]:
        return self._repo.get_by_username(username)

    def get_by_reservation_uid(self, reservation_uid: str, username: str) -> Reservation:
        """Return the reservation if it belongs to username; raise ForbiddenError otherwise."""
        found = self._repo.get_by_reservation_uid(reservation_uid)
        if found.username != username:
            raise ForbiddenError()
        return found

    def delete(self, reservation_uid: str) -> None:
        self._repo.delete(reservation_uid)