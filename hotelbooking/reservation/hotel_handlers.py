"""HTTP endpoints for hotels of the reservation service."""

import re
from typing import Any

from flask import Blueprint, jsonify, request

from ..errs import InvalidContentError, ServiceError, http_status
from ..models import Hotel
from ..paging import validate_paging

URL_PREFIX = "/api/v1/hotels"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_REQUIRED_TEXT = ("name", "city", "country", "address")


def hotel_to_response(hotel: Hotel) -> dict[str, Any]:
    return {
        "id": hotel.id,
        "price": hotel.price,
        "stars": hotel.stars,
        "name": hotel.name,
        "hotelUid": hotel.hotel_uid,
        "city": hotel.city,
        "address": hotel.address,
        "country": hotel.country,
    }


def hotels_to_response(hotels: list[Hotel] | None, page: int, size: int) -> dict[str, Any] | None:
    """One page of hotels; None when there is no list at all."""
    if hotels is None:
        return None
    items = [hotel_to_response(hotel) for hotel in hotels]
    return {
        "items": items,
        "totalElements": len(items),
        "page": page,
        "pageSize": size,
    }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _query_int(name: str) -> int:
    text = request.args.get(name, "")
    if not _INTEGER.fullmatch(text):
        raise InvalidContentError(f"{name} must be an integer")
    return int(text)


def _hotel_from_request() -> Hotel:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidContentError("request body must be a JSON object")
    for name in ("price", "stars"):
        value = data.get(name)
        if not _is_int(value) or value == 0:
            raise InvalidContentError(f"{name} is required")
    for name in _REQUIRED_TEXT:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise InvalidContentError(f"{name} is required")
    hotel_uid = data.get("hotelUid", "")
    if hotel_uid is None:
        hotel_uid = ""
    if not isinstance(hotel_uid, str):
        raise InvalidContentError("hotelUid must be a string")
    return Hotel(
        price=data["price"],
        stars=data["stars"],
        name=data["name"],
        city=data["city"],
        country=data["country"],
        address=data["address"],
        hotel_uid=hotel_uid,
    )


def create_blueprint(use_case) -> Blueprint:
    """Blueprint with create, paged listing and lookup endpoints under /api/v1/hotels."""
    bp = Blueprint("hotel", __name__, url_prefix=URL_PREFIX)

    @bp.errorhandler(ServiceError)
    def _service_error(error: ServiceError):
        return "", http_status(error)

    @bp.post("")
    def create():
        created = use_case.create(_hotel_from_request())
        return "", 201, {"Location": f"{URL_PREFIX}/{created.id}"}

    @bp.get("")
    def get_all_paged():
        page = _query_int("page")
        size = _query_int("size")
        paging = validate_paging(request.args.get("size", ""), str((page - 1) * size))
        found = use_case.get_all_paged(paging)
        return jsonify(hotels_to_response(found, page, size)), 200

    @bp.get("/<uid>")
    def get_by_uid(uid: str):
        found = use_case.get_by_uid(uid)
        return jsonify(hotel_to_response(found)), 200

    return bp