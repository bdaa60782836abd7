from dataclasses import dataclass
from functools import cached_property
from importlib import import_module
from inspect import isabstract, isclass
from typing import Optional, Type

from pulumi import ResourceOptions, log

from infra_bunny.lib.base import BaseModule, ExportsType
from infra_bunny.lib.config import get_stack_config


@dataclass
class LazyModule:
    """
    A module found in the package, imported the first time it's used.
    """

    provider: str
    """Name of the provider directory, e.g. ``bunny``"""

    name: str
    """Name of the module directory, e.g. ``cdn``"""

    @property
    def import_path(self) -> str:
        return f"infra_bunny.modules.{self.provider}.{self.name}"

    @cached_property
    def Module(self) -> Type[BaseModule]:
        """The concrete ``BaseModule`` subclass the package exports"""
        package = import_module(self.import_path)

        candidates = [
            value
            for key, value in vars(package).items()
            if not key.startswith("_") and isclass(value) and issubclass(value, BaseModule) and not isabstract(value)
        ]

        if len(candidates) != 1:
            raise ModuleNotFoundError(
                f"expected one subclass of `{BaseModule.__name__}` in `{self.import_path}`, found {len(candidates)}"
            )

        log.debug(f"imported module class `{candidates[0].__name__}` from `{self.import_path}`")

        return candidates[0]

    def run(self, stack_name: str, opts: Optional[ResourceOptions] = None) -> ExportsType:
        """Build the module from the configuration of ``stack_name``

        :param stack_name: Stack name, also the name of the component resource
        :param opts: Options of the component resource
        :return: The exports of the module
        """
        config = get_stack_config(stack=stack_name, config_cls=self.Module.get_config_type())

        return self.Module(name=stack_name, config=config, opts=opts).run()
