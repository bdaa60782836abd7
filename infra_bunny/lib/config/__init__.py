from .bunny_env import BunnyConfigException, HierarchicalConfig, bunny_env
from .core import (
    bunny_config,
    get_environment,
    get_namespace,
    get_phase,
    get_provider_override,
    get_provider_settings,
    get_user_agent,
)
from .mapper import get_stack_config
