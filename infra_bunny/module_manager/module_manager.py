from typing import Optional

from pulumi import log

from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Hands out the modules of the package by provider and stack name."""

    def __init__(self, modules: Optional[dict[str, dict[str, LazyModule]]] = None):
        """
        :param modules: Mapping of provider to stack name to module, discovered in the package by default
        """
        self.modules = discover_modules() if modules is None else modules

        log.debug(f"known modules: {', '.join(f'{p}/{m}' for p in self.modules for m in self.modules[p])}")

    def get_provider_modules(self, provider: str) -> dict[str, LazyModule]:
        """The modules of ``provider``, empty for an unknown provider"""
        return self.modules.get(provider, {})

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Look up a module without importing it

        :param provider: Provider name
        :param module_name: Module name in kebab case, usually the stack name
        :return: The module
        """
        modules = self.get_provider_modules(provider)

        if module_name not in modules:
            raise ModuleNotFoundError(
                f"module `{module_name}` was not found under provider `{provider}`, "
                f"known modules are {sorted(modules)}"
            )

        return modules[module_name]


module_manager = _ModuleManager()
