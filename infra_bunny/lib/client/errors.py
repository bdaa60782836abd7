from typing import Optional

import requests
from dacite import DaciteError


class BunnyClientError(Exception):
    """Base class for errors raised by the bunny.net API client"""


class AuthenticationError(BunnyClientError):
    """The API replied with HTTP 401, the access key is missing or wrong"""

    def __init__(self, message: str):
        super().__init__(f"authentication failed: {message}")
        self.message = message


class HTTPError(BunnyClientError):
    """The API replied with an unexpected status code, or a reply could not be read"""

    def __init__(
        self,
        status_code: int,
        request_url: str,
        body: bytes = b"",
        errors: Optional[list[Exception]] = None,
    ):
        self.status_code = status_code
        self.request_url = request_url
        self.body = body
        self.errors = errors or []

        msg = f"http-request to {request_url} failed: {status_code}"
        if self.errors:
            msg += ", errors: " + "; ".join(str(e) for e in self.errors)

        super().__init__(msg)


class APIError(HTTPError):
    """The API replied with an error object (``ErrorKey``, ``Field``, ``Message``)"""

    def __init__(
        self,
        message: str,
        status_code: int,
        request_url: str,
        error_key: Optional[str] = None,
        field: Optional[str] = None,
        body: bytes = b"",
    ):
        self.status_code = status_code
        self.request_url = request_url
        self.body = body
        self.errors = []
        self.message = message
        self.error_key = error_key
        self.field = field

        BunnyClientError.__init__(self, f"{request_url}: {field}: {message}" if field else f"{request_url}: {message}")


API_ERRORS = (BunnyClientError, requests.RequestException, DaciteError)
"""Everything a client call can raise: API errors, transport errors and replies not matching the API models"""
