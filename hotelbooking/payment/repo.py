"""Storage of payments in the `payment` table."""

from collections.abc import Collection

from ..errs import NoContentError, NotFoundError, ServiceError
from ..models import Payment
from ..postgres import Postgres

NO_ROWS = "no rows in result set"

_UPDATABLE = ("status", "price")


class PaymentRepo:
    """Reads and writes payments through a Postgres pool."""

    def __init__(self, db: Postgres) -> None:
        self._db = db

    def create(self, payment: Payment) -> Payment:
        sql, args = (
            self._db.builder.insert("payment")
            .columns("price, status, payment_uid")
            .values(payment.price, payment.status, payment.payment_uid)
            .suffix("RETURNING id")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise ServiceError(NO_ROWS)
        (record_id,) = row
        return Payment(
            id=record_id, price=payment.price, status=payment.status, payment_uid=payment.payment_uid
        )

    def update(self, payment: Payment, fields: Collection[str]) -> Payment:
        """Write the named fields of the payment with payment.payment_uid."""
        query = self._db.builder.update("payment")
        for column in _UPDATABLE:
            if column in fields:
                query = query.set(column, getattr(payment, column))
        sql, args = (
            query.where({"payment_uid": payment.payment_uid})
            .suffix("RETURNING status, price, id")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        status, price, record_id = row
        return Payment(id=record_id, price=price, status=status, payment_uid=payment.payment_uid)

    def get_by_payment_uid(self, payment_uid: str) -> Payment:
        sql, args = (
            self._db.builder.select("id, price, status")
            .from_("payment")
            .where({"payment_uid": payment_uid})
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        record_id, price, status = row
        return Payment(id=record_id, price=price, status=status, payment_uid=payment_uid)

    def delete(self, payment_uid: str) -> None:
        sql, args = self._db.builder.delete("payment").where({"payment_uid": payment_uid}).to_sql()
        if self._db.pool.execute(sql, args) == 0:
            raise NoContentError()