from abc import ABC

from pulumi import ResourceOptions

from infra_bunny.lib.base import BaseModule, ConfigType
from infra_bunny.lib.config import get_provider_settings


class BunnyModule(BaseModule, ABC):
    """
    Base class for bunny modules managing bunny.net resources
    """

    provider: str = "bunny"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.settings = get_provider_settings()

    def child_opts(self, **kwargs) -> ResourceOptions:
        """Resource options placing a resource below this module"""
        return ResourceOptions(parent=self, **kwargs)
