import os
from dataclasses import dataclass
from typing import Optional

from infra_bunny.lib.client import BASE_URL, DEFAULT_USER_AGENT, Client

API_KEY_ENV_VAR = "BUNNY_API_KEY"

DEFAULT_CREATE_TIMEOUT = 20 * 60


class CredentialsNotConfiguredError(Exception):
    def __init__(self):
        super().__init__(
            "credentials not configured, either api_key must be set in the provider config or the environment "
            f"variable {API_KEY_ENV_VAR}"
        )


def resolve_api_key(configured: Optional[str]) -> str:
    """Return the configured API key, falling back to the ``BUNNY_API_KEY`` environment variable

    :raises CredentialsNotConfiguredError: Neither is set
    """
    if configured:
        return configured

    if api_key := os.getenv(API_KEY_ENV_VAR):
        return api_key

    raise CredentialsNotConfiguredError()


@dataclass
class ProviderSettings:
    """
    Everything a dynamic provider needs to talk to the API.

    Dynamic providers are serialized into the Pulumi program's state and run without access to the Pulumi runtime,
    so they receive their settings as a plain object and build their API client from it.
    """

    api_key: Optional[str] = None
    """The API key, ``None`` to use the ``BUNNY_API_KEY`` environment variable of the process running the provider"""

    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = BASE_URL
    create_timeout: float = DEFAULT_CREATE_TIMEOUT
    """Seconds to wait for long running creations, e.g. loading a free certificate"""

    def client(self) -> Client:
        return Client(resolve_api_key(self.api_key), base_url=self.base_url, user_agent=self.user_agent)
