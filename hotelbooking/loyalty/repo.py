"""Storage of loyalty records in the `loyalty` table."""

from collections.abc import Collection

from ..errs import NoContentError, NotFoundError, ServiceError
from ..models import Loyalty
from ..postgres import Postgres

NO_ROWS = "no rows in result set"

_UPDATABLE = ("status", "reservation_count", "discount")


class LoyaltyRepo:
    """Reads and writes loyalty records through a Postgres pool."""

    def __init__(self, db: Postgres) -> None:
        self._db = db

    def create(self, loyalty: Loyalty) -> Loyalty:
        """Insert a record; id, status and reservation count come from the database."""
        sql, args = (
            self._db.builder.insert("loyalty")
            .columns("username, discount")
            .values(loyalty.username, loyalty.discount)
            .suffix("RETURNING id, status, reservation_count")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise ServiceError(NO_ROWS)
        record_id, status, reservation_count = row
        return Loyalty(
            id=record_id,
            status=status,
            reservation_count=reservation_count,
            username=loyalty.username,
            discount=loyalty.discount,
        )

    def update(self, loyalty: Loyalty, fields: Collection[str]) -> Loyalty:
        """Write the named fields of the record owned by loyalty.username."""
        query = self._db.builder.update("loyalty")
        for column in _UPDATABLE:
            if column in fields:
                query = query.set(column, getattr(loyalty, column))
        sql, args = (
            query.where({"username": loyalty.username})
            .suffix("RETURNING status, reservation_count, discount, id")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NoContentError()
        status, reservation_count, discount, record_id = row
        return Loyalty(
            id=record_id,
            status=status,
            reservation_count=reservation_count,
            discount=discount,
            username=loyalty.username,
        )

    def get_by_username(self, username: str) -> Loyalty:
        sql, args = (
            self._db.builder.select("id, status, discount, reservation_count")
            .from_("loyalty")
            .where({"username": username})
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        record_id, status, discount, reservation_count = row
        return Loyalty(
            id=record_id,
            status=status,
            discount=discount,
            reservation_count=reservation_count,
            username=username,
        )