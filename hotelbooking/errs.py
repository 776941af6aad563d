"""Domain errors shared by the services and their HTTP status codes."""

from http import HTTPStatus


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(ServiceError):
    message = "not found"


class NoContentError(ServiceError):
    message = "no content"


class UnauthorizedError(ServiceError):
    message = "user unathorized"


class ForbiddenError(ServiceError):
    message = "user not an owner"


class InvalidContentError(ServiceError):
    message = "invalid content"


class LoginExistsError(ServiceError):
    message = "login already exists"


class InvalidAccessTokenError(ServiceError):
    message = "invalid access token"


class InvalidPasswordError(ServiceError):
    message = "invalid password"


_STATUS_BY_ERROR: list[tuple[type[ServiceError], HTTPStatus]] = [
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (NoContentError, HTTPStatus.NO_CONTENT),
    (InvalidContentError, HTTPStatus.BAD_REQUEST),
    (ForbiddenError, HTTPStatus.FORBIDDEN),
    (UnauthorizedError, HTTPStatus.UNAUTHORIZED),
    (InvalidAccessTokenError, HTTPStatus.UNAUTHORIZED),
    (InvalidPasswordError, HTTPStatus.UNAUTHORIZED),
    (LoginExistsError, HTTPStatus.CONFLICT),
]


def http_status(error: BaseException) -> int:
    """Return the HTTP status code that answers the given error."""
    for kind, status in _STATUS_BY_ERROR:
        if isinstance(error, kind):
            return int(status)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)