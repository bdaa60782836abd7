from typing import Optional

from pulumi import Config

from infra_bunny.lib.client import DEFAULT_USER_AGENT
from infra_bunny.lib.provider import CredentialsNotConfiguredError, ProviderSettings, resolve_api_key
from infra_bunny.lib.provider.settings import API_KEY_ENV_VAR, DEFAULT_CREATE_TIMEOUT
from infra_bunny.lib.utils import run_once
from .bunny_env import BunnyConfigException, bunny_env

bunny_config = Config("bunny")


def get_namespace() -> str:
    return bunny_env.get("namespace", "bunny")


def get_phase() -> str:
    return bunny_env.require("phase")


def get_environment() -> str:
    """
    Returns the name of the environment this program manages
    Environments are named `{namespace}-{phase}`, e.g. `oh-dev`.

    Can be overridden by setting `environment` in your Bunny.common.yaml

    :return: Environment name
    """
    return bunny_env.get("environment") or f"{get_namespace()}-{get_phase()}"


def get_user_agent() -> str:
    """
    Returns the user agent sent to the bunny.net API, e.g. `infra-bunny oh-dev platform-team`

    A `user_agent_suffix` in your Bunny.common.yaml is appended to the environment name.

    :return: User agent
    """
    user_agent = f"{DEFAULT_USER_AGENT} {get_environment()}"

    if suffix := bunny_env.get("user_agent_suffix"):
        return f"{user_agent} {suffix}"

    return user_agent


@run_once
def get_provider_settings() -> ProviderSettings:
    """
    Returns the settings the bunny.net resources of this program use

    The API key is read from the secret `bunny:apiKey` stack config, or else from the `BUNNY_API_KEY` environment
    variable. A key from the environment is not stored in the settings, it's resolved again whenever a provider runs,
    so it does not end up in the statefile.

    `bunny:createTimeout` overrides the seconds to wait for long running creations.

    :return: The provider settings
    """
    api_key = bunny_config.get("apiKey")

    try:
        resolve_api_key(api_key)
    except CredentialsNotConfiguredError as e:
        raise BunnyConfigException(f"{bunny_config.name}:apiKey", API_KEY_ENV_VAR) from e

    return ProviderSettings(
        api_key=api_key,
        user_agent=get_user_agent(),
        base_url=bunny_config.get("apiUrl") or ProviderSettings.base_url,
        create_timeout=bunny_config.get_float("createTimeout") or DEFAULT_CREATE_TIMEOUT,
    )


def get_provider_override() -> Optional[str]:
    """
    Retrieve the provider override for the current module (`bunny:provider: myprovider`)

    :return: The provider name
    """
    return bunny_config.get("provider")
