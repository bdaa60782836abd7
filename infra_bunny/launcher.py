import logging
import os

from pulumi import export, get_stack, log

from infra_bunny.lib.base import ExportsType
from infra_bunny.lib.config import get_provider_override
from infra_bunny.module_manager import module_manager

DEFAULT_PROVIDER = "bunny"

# The config and the client set up loggers when they are imported, the level has to be in place before.
if os.getenv("BUNNY_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s %(name)s]: %(message)s")
    logging.getLogger(__name__).debug("bunny debug logging enabled")


def run_stack(provider: str, stack_name: str) -> ExportsType:
    """Build the module named ``stack_name`` and export its outputs under the same name

    `bunny:provider` in the stack config takes precedence over ``provider``.

    :param provider: Provider of the module
    :param stack_name: Stack name, selects the module and its configuration
    :return: The exports of the module
    """
    module = module_manager.get_module(get_provider_override() or provider, stack_name)

    log.debug(f"running module `{module.provider}/{module.name}` for stack `{stack_name}`")

    exports = module.run(stack_name)
    export(stack_name, exports)

    return exports


def run_active_stack(provider: str = DEFAULT_PROVIDER) -> ExportsType:
    """Build the module of the selected stack, see ``run_stack``"""
    return run_stack(provider, get_stack())
