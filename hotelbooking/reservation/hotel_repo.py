"""Storage of hotels in the `hotels` table."""

from ..errs import NotFoundError, ServiceError
from ..models import Hotel
from ..paging import Paging
from ..postgres import Postgres

NO_ROWS = "no rows in result set"


class HotelRepo:
    """Reads and writes hotels through a Postgres pool."""

    def __init__(self, db: Postgres) -> None:
        self._db = db

    def create(self, hotel: Hotel) -> Hotel:
        sql, args = (
            self._db.builder.insert("hotels")
            .columns("price, stars, hotel_uid, city, address, country, name")
            .values(
                hotel.price,
                hotel.stars,
                hotel.hotel_uid,
                hotel.city,
                hotel.address,
                hotel.country,
                hotel.name,
            )
            .suffix("RETURNING id")
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise ServiceError(NO_ROWS)
        (record_id,) = row
        return Hotel(
            id=record_id,
            stars=hotel.stars,
            price=hotel.price,
            name=hotel.name,
            country=hotel.country,
            address=hotel.address,
            city=hotel.city,
            hotel_uid=hotel.hotel_uid,
        )

    def get_all_paged(self, paging: Paging) -> list[Hotel]:
        sql, args = (
            self._db.builder.select("id, price, stars, hotel_uid, city, address, country, name")
            .from_("hotels")
            .limit(paging.limit)
            .offset(paging.offset)
            .to_sql()
        )
        return [
            Hotel(
                id=record_id,
                price=price,
                stars=stars,
                hotel_uid=hotel_uid,
                city=city,
                address=address,
                country=country,
                name=name,
            )
            for record_id, price, stars, hotel_uid, city, address, country, name in self._db.pool.fetch_all(
                sql, args
            )
        ]

    def get_by_id(self, hotel_id: int) -> Hotel:
        sql, args = (
            self._db.builder.select("price, stars, hotel_uid, city, address, country, name")
            .from_("hotels")
            .where({"id": hotel_id})
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        price, stars, hotel_uid, city, address, country, name = row
        return Hotel(
            id=hotel_id,
            price=price,
            stars=stars,
            hotel_uid=hotel_uid,
            city=city,
            address=address,
            country=country,
            name=name,
        )

    def get_by_uid(self, uid: str) -> Hotel:
        sql, args = (
            self._db.builder.select("price, stars, id, city, address, country, name")
            .from_("hotels")
            .where({"hotel_uid": uid})
            .to_sql()
        )
        row = self._db.pool.fetch_one(sql, args)
        if row is None:
            raise NotFoundError()
        price, stars, record_id, city, address, country, name = row
        return Hotel(
            id=record_id,
            price=price,
            stars=stars,
            hotel_uid=uid,
            city=city,
            address=address,
            country=country,
            name=name,
        )