import pytest
from flask import Flask

from hotelbooking.errs import NotFoundError
from hotelbooking.models import Hotel, Reservation
from hotelbooking.reservation.reservation_handlers import (
    create_blueprint,
    reservation_to_response,
    reservations_to_response,
)
from hotelbooking.reservation.reservation_usecase import ReservationUseCase
from hotelbooking.uuider import UUIDer


class FixedUUIDer(UUIDer):
    def generate(self):
        return "generated-uid"


class MemoryRepo:
    def __init__(self):
        self.items = {}

    def create(self, reservation):
        stored = Reservation(**{**vars(reservation), "id": len(self.items) + 1})
        self.items[stored.reservation_uid] = stored
        return stored

    def get_by_username(self, username):
        return [r for r in self.items.values() if r.username == username]

    def get_by_reservation_uid(self, reservation_uid):
        try:
            return self.items[reservation_uid]
        except KeyError:
            raise NotFoundError() from None

    def delete(self, reservation_uid):
        if reservation_uid not in self.items:
            raise NotFoundError()
        self.items[reservation_uid].status = "CANCELED"


class FakeHotelUseCase:
    def __init__(self, hotels):
        self.hotels = {hotel.id: hotel for hotel in hotels}

    def get_by_id(self, hotel_id):
        try:
            return self.hotels[hotel_id]
        except KeyError:
            raise NotFoundError() from None


HOTEL = Hotel(
    id=1,
    stars=4,
    price=1500,
    name="Ararat Park",
    country="Russia",
    city="Moscow",
    address="Neglinnaya 4",
    hotel_uid="hotel-uid-1",
)

BODY = {
    "paymentUid": "payment-uid-1",
    "status": "PAID",
    "hotel_id": 1,
    "startDate": "2021-10-08",
    "endDate": "2021-10-11",
}


@pytest.fixture
def repo():
    return MemoryRepo()


@pytest.fixture
def client(repo):
    app = Flask(__name__)
    app.register_blueprint(
        create_blueprint(ReservationUseCase(repo, FixedUUIDer()), FakeHotelUseCase([HOTEL]))
    )
    return app.test_client()


def test_reservation_to_response_joins_address():
    reservation = Reservation(id=3, hotel_id=1, username="alice", reservation_uid="r1")
    body = reservation_to_response(reservation, HOTEL)
    assert body["hotel"]["fullAddress"] == "Russia, Moscow, Neglinnaya 4"
    assert body["hotel"]["hotelUid"] == HOTEL.hotel_uid
    assert body["reservationUid"] == "r1"
    assert body["hotel_id"] == 1


def test_reservations_to_response_pairs_in_order():
    items = [Reservation(reservation_uid="a"), Reservation(reservation_uid="b")]
    body = reservations_to_response(items, [HOTEL, HOTEL])
    assert [entry["reservationUid"] for entry in body] == ["a", "b"]


def test_reservations_to_response_length_mismatch():
    with pytest.raises(ValueError):
        reservations_to_response([Reservation()], [])


def test_create_sets_location_and_username(client, repo):
    response = client.post("/api/v1/reservations", json=BODY, headers={"X-User-Name": "alice"})
    assert response.status_code == 201
    assert response.headers["Location"] == "/api/v1/reservations/generated-uid"
    stored = repo.items["generated-uid"]
    assert stored.username == "alice"
    assert stored.payment_uid == BODY["paymentUid"]


def test_create_requires_username(client, repo):
    response = client.post("/api/v1/reservations", json=BODY)
    assert response.status_code == 400
    assert repo.items == {}


@pytest.mark.parametrize("missing", ["paymentUid", "status", "hotel_id", "startDate", "endDate"])
def test_create_requires_fields(client, repo, missing):
    body = {k: v for k, v in BODY.items() if k != missing}
    response = client.post("/api/v1/reservations", json=body, headers={"X-User-Name": "alice"})
    assert response.status_code == 400
    assert repo.items == {}


def test_get_by_uid_owner(client):
    client.post("/api/v1/reservations", json=BODY, headers={"X-User-Name": "alice"})
    response = client.get("/api/v1/reservations/generated-uid", headers={"X-User-Name": "alice"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["username"] == "alice"
    assert body["startDate"] == BODY["startDate"]
    assert body["hotel"]["name"] == HOTEL.name


def test_get_by_uid_other_user(client):
    client.post("/api/v1/reservations", json=BODY, headers={"X-User-Name": "alice"})
    response = client.get("/api/v1/reservations/generated-uid", headers={"X-User-Name": "bob"})
    assert response.status_code == 403


def test_get_by_uid_missing(client):
    response = client.get("/api/v1/reservations/absent", headers={"X-User-Name": "alice"})
    assert response.status_code == 404


def test_get_by_uid_requires_username(client):
    response = client.get("/api/v1/reservations/generated-uid")
    assert response.status_code == 400


def test_list_by_username(client):
    client.post("/api/v1/reservations", json=BODY, headers={"X-User-Name": "alice"})
    response = client.get("/api/v1/reservations", headers={"X-User-Name": "alice"})
    assert response.status_code == 200
    body = response.get_json()
    assert [entry["reservationUid"] for entry in body] == ["generated-uid"]
    other = client.get("/api/v1/reservations", headers={"X-User-Name": "bob"})
    assert other.get_json() == []


def test_list_with_missing_hotel_is_server_error(client, repo):
    repo.create(Reservation(username="alice", reservation_uid="r9", hotel_id=99))
    response = client.get("/api/v1/reservations", headers={"X-User-Name": "alice"})
    assert response.status_code == 500


def test_delete_cancels(client, repo):
    client.post("/api/v1/reservations", json=BODY, headers={"X-User-Name": "alice"})
    response = client.delete("/api/v1/reservations/generated-uid")
    assert response.status_code == 204
    assert repo.items["generated-uid"].status == "CANCELED"


def test_delete_missing(client):
    response = client.delete("/api/v1/reservations/absent")
    assert response.status_code == 404