"""HTTP endpoints for reservations of the reservation service."""

from typing import Any

from flask import Blueprint, jsonify, request

from ..errs import InvalidContentError, ServiceError, http_status
from ..models import Hotel, Reservation

USER_HEADER = "X-User-Name"
URL_PREFIX = "/api/v1/reservations"

_REQUIRED_TEXT = ("paymentUid", "status", "startDate", "endDate")


def reservation_to_response(reservation: Reservation, hotel: Hotel) -> dict[str, Any]:
    return {
        "id": reservation.id,
        "hotel_id": reservation.hotel_id,
        "paymentUid": reservation.payment_uid,
        "reservationUid": reservation.reservation_uid,
        "username": reservation.username,
        "status": reservation.status,
        "startDate": reservation.start_date,
        "endDate": reservation.end_date,
        "hotel": {
            "stars": hotel.stars,
            "fullAddress": f"{hotel.country}, {hotel.city}, {hotel.address}",
            "name": hotel.name,
            "hotelUid": hotel.hotel_uid,
        },
    }


def reservations_to_response(
    reservations: list[Reservation], hotels: list[Hotel]
) -> list[dict[str, Any]]:
    """Pair each reservation with the hotel at the same position."""
    return [
        reservation_to_response(reservation, hotel)
        for reservation, hotel in zip(reservations, hotels, strict=True)
    ]


def _username() -> str:
    username = request.headers.get(USER_HEADER, "")
    if not username:
        raise InvalidContentError(f"{USER_HEADER} header is required")
    return username


def _reservation_from_request() -> Reservation:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidContentError("request body must be a JSON object")
    for name in _REQUIRED_TEXT:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise InvalidContentError(f"{name} is required")
    hotel_id = data.get("hotel_id")
    if not isinstance(hotel_id, int) or isinstance(hotel_id, bool) or hotel_id == 0:
        raise InvalidContentError("hotel_id is required")
    return Reservation(
        status=data["status"],
        start_date=data["startDate"],
        end_date=data["endDate"],
        hotel_id=hotel_id,
        payment_uid=data["paymentUid"],
    )


def create_blueprint(reservation_use_case, hotel_use_case) -> Blueprint:
    """Blueprint with create, lookup, listing and cancel endpoints under /api/v1/reservations."""
    bp = Blueprint("reservation", __name__, url_prefix=URL_PREFIX)

    @bp.errorhandler(ServiceError)
    def _service_error(error: ServiceError):
        return "", http_status(error)

    def _hotel_of(reservation: Reservation) -> Hotel:
        try:
            return hotel_use_case.get_by_id(reservation.hotel_id)
        except ServiceError as error:
            raise ServiceError(f"hotel {reservation.hotel_id} of reservation is missing") from error

    @bp.post("")
    def create():
        reservation = _reservation_from_request()
        reservation.username = _username()
        created = reservation_use_case.create(reservation)
        return "", 201, {"Location": f"{URL_PREFIX}/{created.reservation_uid}"}

    @bp.get("/<reservation_uid>")
    def get_by_reservation_uid(reservation_uid: str):
        username = _username()
        found = reservation_use_case.get_by_reservation_uid(reservation_uid, username)
        hotel = hotel_use_case.get_by_id(found.hotel_id)
        return jsonify(reservation_to_response(found, hotel)), 200

    @bp.get("")
    def get_by_username():
        found = reservation_use_case.get_by_username(_username())
        hotels = [_hotel_of(reservation) for reservation in found]
        return jsonify(reservations_to_response(found, hotels)), 200

    @bp.delete("/<reservation_uid>")
    def delete(reservation_uid: str):
        reservation_use_case.delete(reservation_uid)
        return "", 204

    return bp