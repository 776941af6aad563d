"""Storage of reservations in the `reservation` table."""

from ..errs import NotFoundError, ServiceError
from ..models import Reservation
from ..postgres import Postgres

NO_ROWS = "no rows in result set"
CANCELED = "CANCELED"


class ReservationRepo:
    """Reads and writes reservations through a Postgres pool."""

    def __init__(self, db: Postgres) -> None:
        self._db = db

    def create(self, reservation: Reservation) -> Reservation:
        sql, args = (
            self._db.builder.insert("reservation")
            .columns("hotel_id, username, status, reservation_uid, payment_uid, start_date, end_data")
            .values(
                reservation.hotel_id,
                reservation.username,
                reservation.status,
                reservation.reservation_uid,
                reservation.payment_uid,
                reservation.start_date,
                reservation.end_date,
            )
            .suffix("RETURNING id")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise ServiceError(NO_ROWS)
        (record_id,) = row
        return Reservation(
            id=record_id,
            hotel_id=reservation.hotel_id,
            username=reservation.username,
            status=reservation.status,
            reservation_uid=reservation.reservation_uid,
            payment_uid=reservation.payment_uid,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
        )

    def get_by_username(self, username: str) -> list[Reservation]:
        sql, args = (
            self._db.builder.select(
                "id, hotel_id, status, reservation_uid, payment_uid, start_date::text, end_data::text"
            )
            .from_("reservation")
            .where({"username": username})
            .to_sql()
        )
        return [
            Reservation(
                id=record_id,
                hotel_id=hotel_id,
                username=username,
                status=status,
                reservation_uid=reservation_uid,
                payment_uid=payment_uid,
                start_date=start_date,
                end_date=end_date,
            )
            for record_id, hotel_id, status, reservation_uid, payment_uid, start_date, end_date in (
                self._db.pool.fetch_all(sql, args)
            )
        ]

    def get_by_reservation_uid(self, reservation_uid: str) -> Reservation:
        sql, args = (
            self._db.builder.select(
                "id, hotel_id, status, username, payment_uid, start_date::text, end_data::text"
            )
            .from_("reservation")
            .where({"reservation_uid": reservation_uid})
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        record_id, hotel_id, status, username, payment_uid, start_date, end_date = row
        return Reservation(
            id=record_id,
            hotel_id=hotel_id,
            username=username,
            status=status,
            reservation_uid=reservation_uid,
            payment_uid=payment_uid,
            start_date=start_date,
            end_date=end_date,
        )

    def delete(self, reservation_uid: str) -> None:
        """Mark the reservation as canceled; the row itself is kept."""
        sql, args = (
            self._db.builder.update("reservation")
            .set("status", CANCELED)
            .where({"reservation_uid": reservation_uid})
            .to_sql()
        )
        if self._db.pool.execute(sql, args) == 0:
            raise NotFoundError()