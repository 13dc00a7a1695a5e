from typing import NoReturn

from fastapi import status

from libs.result import Error
from src.app.errors import ErrorKind, kind_of

STATUS_BY_KIND = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.authentication: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.authorization: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """5xx failure; only dependency failures expose their message to the client"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP error matching the kind of a use case error code"""
    kind = kind_of(error)
    if kind is None:
        raise ServerError(error)
    if kind == ErrorKind.dependency:
        raise ServerError(error, status_code=status.HTTP_502_BAD_GATEWAY)
    raise ClientError(error, status_code=STATUS_BY_KIND[kind])
