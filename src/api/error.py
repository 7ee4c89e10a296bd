from typing import Dict, NoReturn

from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def raise_for_error(error: Error, client_statuses: Dict[str, int]) -> NoReturn:
    """Raise ClientError for a known business code, ServerError otherwise"""
    status_code = client_statuses.get(error.code)
    if status_code is not None:
        raise ClientError(error, status_code=status_code)
    raise ServerError(error)
