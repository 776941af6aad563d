import pytest

from hotelbooking.errs import NoContentError, NotFoundError, ServiceError
from hotelbooking.models import Payment
from hotelbooking.payment.repo import PaymentRepo
from hotelbooking.postgres import Pool, Postgres


class FakePool(Pool):
    def __init__(self, rows=(), rowcount=0):
        self.rows = list(rows)
        self.rowcount = rowcount
        self.calls = []

    def fetch_one(self, sql, args):
        self.calls.append((sql, list(args)))
        return self.rows[0] if self.rows else None

    def fetch_all(self, sql, args):
        self.calls.append((sql, list(args)))
        return list(self.rows)

    def execute(self, sql, args):
        self.calls.append((sql, list(args)))
        return self.rowcount

    def close(self):
        pass


def make_repo(rows=(), rowcount=0):
    pool = FakePool(rows, rowcount)
    return PaymentRepo(Postgres(pool=pool)), pool


def test_get_by_payment_uid_ok():
    repo, pool = make_repo([(1, 2, "a")])
    got = repo.get_by_payment_uid("someUid")
    assert got == Payment(id=1, price=2, status="a", payment_uid="someUid")
    assert pool.calls == [("SELECT id, price, status FROM payment WHERE payment_uid = $1", ["someUid"])]


def test_get_by_payment_uid_no_rows():
    repo, _ = make_repo()
    with pytest.raises(NotFoundError):
        repo.get_by_payment_uid("someUid")


def test_create():
    repo, pool = make_repo([(5,)])
    got = repo.create(Payment(price=300, status="PAID", payment_uid="uid-1"))
    assert got == Payment(id=5, price=300, status="PAID", payment_uid="uid-1")
    assert pool.calls == [
        (
            "INSERT INTO payment (price, status, payment_uid) VALUES ($1,$2,$3) RETURNING id",
            [300, "PAID", "uid-1"],
        )
    ]


def test_create_without_row_fails():
    repo, _ = make_repo()
    with pytest.raises(ServiceError):
        repo.create(Payment(price=1, status="PAID", payment_uid="uid-1"))


def test_update_status():
    repo, pool = make_repo([("CANCELED", 300, 3)])
    got = repo.update(Payment(status="CANCELED", payment_uid="uid-1"), {"status"})
    assert got == Payment(id=3, price=300, status="CANCELED", payment_uid="uid-1")
    assert pool.calls == [
        (
            "UPDATE payment SET status = $1 WHERE payment_uid = $2 RETURNING status, price, id",
            ["CANCELED", "uid-1"],
        )
    ]


def test_update_status_and_price_order():
    repo, pool = make_repo([("PAID", 50, 3)])
    repo.update(Payment(status="PAID", price=50, payment_uid="uid-1"), ["price", "status"])
    sql, args = pool.calls[0]
    assert sql == "UPDATE payment SET status = $1, price = $2 WHERE payment_uid = $3 RETURNING status, price, id"
    assert args == ["PAID", 50, "uid-1"]


def test_update_missing_payment():
    repo, _ = make_repo()
    with pytest.raises(NotFoundError):
        repo.update(Payment(status="CANCELED", payment_uid="nope"), {"status"})


def test_delete():
    repo, pool = make_repo(rowcount=1)
    repo.delete("uid-1")
    assert pool.calls == [("DELETE FROM payment WHERE payment_uid = $1", ["uid-1"])]


def test_delete_missing_is_no_content():
    repo, _ = make_repo(rowcount=0)
    with pytest.raises(NoContentError):
        repo.delete("uid-1")