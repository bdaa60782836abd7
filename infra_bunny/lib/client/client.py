import json
import logging
from typing import Any, Optional

import requests

from .errors import APIError, AuthenticationError, HTTPError
from .models import to_wire
from .pullzone import PullZoneService
from .storagezone import StorageZoneService
from .videolibrary import VideoLibraryService

logger = logging.getLogger(__name__)

BASE_URL = "https://api.bunny.net"
ACCESS_KEY_HEADER = "AccessKey"
DEFAULT_USER_AGENT = "infra-bunny"


class Client:
    """
    Client for the bunny.net HTTP API.

    The client is stateless apart from its credential and HTTP session, it performs exactly one HTTP call per operation
    and never retries. Errors are raised as:

    - ``requests`` exceptions for transport failures, unmodified,
    - ``AuthenticationError`` for HTTP 401,
    - ``APIError`` for other non-2xx replies carrying a bunny.net error object,
    - ``HTTPError`` for any other non-2xx reply and for 2xx replies that are not valid JSON.

    Example usage:
        from infra_bunny.lib.client import Client

        client = Client(api_key)
        zone = client.pull_zone.get(1234)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.session = session or requests.Session()
        self.timeout = timeout

        self.pull_zone = PullZoneService(self)
        self.storage_zone = StorageZoneService(self)
        self.video_library = VideoLibraryService(self)

    def _headers(self, has_body: bool) -> dict:
        headers = {
            ACCESS_KEY_HEADER: self.api_key,
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Any = None,
        expect_result: bool = True,
    ) -> Any:
        """Send a request to the API and return the decoded JSON reply

        :param method: HTTP method
        :param path: Path relative to the base URL, e.g. ``/pullzone/1``
        :param params: Query string parameters
        :param body: An API model or a plain dict, sent as JSON with absent fields omitted
        :param expect_result: Whether the reply body is decoded, ``None`` is returned otherwise
        :return: The decoded JSON reply
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        data = json.dumps(to_wire(body)) if body is not None else None
        headers = self._headers(data is not None)

        self._log_request(method, url, params, headers, data)

        response = self.session.request(method, url, params=params, headers=headers, data=data, timeout=self.timeout)

        logger.debug("%s %s replied with %s: %s", method, url, response.status_code, response.text)

        self._check_response(response)

        if not expect_result:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise HTTPError(
                response.status_code,
                response.url or url,
                response.content,
                [ValueError(f"decoding response body into json failed: {e}")],
            )

    @staticmethod
    def _log_request(method: str, url: str, params: Optional[dict], headers: dict, data: Optional[str]) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return

        masked = {**headers, ACCESS_KEY_HEADER: "***hidden***"}
        logger.debug("sending %s %s params=%s headers=%s body=%s", method, url, params, masked, data)

    @staticmethod
    def _check_response(response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return

        if response.status_code == 401:
            raise AuthenticationError(response.text or "Unauthorized")

        try:
            error = response.json()
        except ValueError as e:
            raise HTTPError(
                response.status_code,
                response.url,
                response.content,
                [ValueError(f"could not parse body as APIError: {e}")],
            )

        if not isinstance(error, dict):
            raise HTTPError(
                response.status_code,
                response.url,
                response.content,
                [ValueError("could not parse body as APIError: not a JSON object")],
            )

        raise APIError(
            message=error.get("Message") or "",
            status_code=response.status_code,
            request_url=response.url,
            error_key=error.get("ErrorKey"),
            field=error.get("Field"),
            body=response.content,
        )
