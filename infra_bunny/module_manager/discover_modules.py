from pathlib import Path
from typing import Optional

from pulumi import log

import infra_bunny
from infra_bunny.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

_modules_dir = "modules"


def _subdirs(path: Path) -> list[Path]:
    """Directories below ``path``, private ones like ``__pycache__`` excluded"""
    return sorted(p for p in path.iterdir() if p.is_dir() and not p.name.startswith("_"))


def discover_modules(package_path: Optional[Path] = None) -> dict[str, dict[str, LazyModule]]:
    """Find the modules of every provider

    A module lives in ``infra_bunny/modules/{provider}/{module}`` and is keyed by its directory name in kebab case,
    the name of the stack that runs it::

        {
            "bunny": {
                "cdn": LazyModule(provider='bunny', name='cdn'),
                "storage": LazyModule(provider='bunny', name='storage'),
                "video": LazyModule(provider='bunny', name='video'),
            },
        }

    :param package_path: Directory of the ``infra_bunny`` package, the installed one by default
    :return: Mapping of provider to stack name to module
    """
    package_path = package_path or Path(infra_bunny.__file__).parent
    modules_path = package_path / _modules_dir

    log.debug(f"looking for modules in `{modules_path}`")

    return {
        provider.name: {
            kebab_from_snake(module.name): LazyModule(provider.name, module.name) for module in _subdirs(provider)
        }
        for provider in _subdirs(modules_path)
    }
