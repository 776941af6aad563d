"""HTTP endpoints of the loyalty service."""

from typing import Any

from flask import Blueprint, jsonify, request

from ..errs import InvalidContentError, ServiceError, http_status
from ..models import Loyalty

USER_HEADER = "X-User-Name"
URL_PREFIX = "/api/v1/loyalty"


def loyalty_to_response(loyalty: Loyalty) -> dict[str, Any]:
    return {
        "id": loyalty.id,
        "username": loyalty.username,
        "status": loyalty.status,
        "reservationCount": loyalty.reservation_count,
        "discount": loyalty.discount,
    }


def _json_object() -> dict[str, Any]:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidContentError("request body must be a JSON object")
    return data


def _username() -> str:
    username = request.headers.get(USER_HEADER, "")
    if not username:
        raise InvalidContentError(f"{USER_HEADER} header is required")
    return username


def create_blueprint(use_case) -> Blueprint:
    """Blueprint with create, update-count and lookup endpoints under /api/v1/loyalty."""
    bp = Blueprint("loyalty", __name__, url_prefix=URL_PREFIX)

    @bp.errorhandler(ServiceError)
    def _service_error(error: ServiceError):
        return "", http_status(error)

    @bp.post("")
    def create():
        username = _json_object().get("username")
        if not isinstance(username, str) or not username:
            raise InvalidContentError("username is required")
        created = use_case.create(Loyalty(username=username))
        return "", 201, {"Location": f"{URL_PREFIX}/{created.id}"}

    @bp.patch("")
    def update_res_count_by_one():
        count = _json_object().get("reservationCount")
        if count is not None and (not isinstance(count, int) or isinstance(count, bool)):
            raise InvalidContentError("reservationCount must be an integer")
        username = _username()
        updated = use_case.update_res_count_by_one(
            Loyalty(username=username, reservation_count=count or 0)
        )
        return jsonify(loyalty_to_response(updated)), 200

    @bp.get("")
    def get_by_username():
        found = use_case.get_by_username(_username())
        return jsonify(loyalty_to_response(found)), 200

    return bp