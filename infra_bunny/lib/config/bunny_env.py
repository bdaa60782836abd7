import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Optional

import hiyapyco

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "Bunny.common.yaml"


class BunnyConfigException(Exception):
    def __init__(self, key, env_var: Optional[str] = None):
        message = f"Missing required configuration variable '{key}'"
        if env_var:
            message += f" (or environment variable '{env_var}')"
        super().__init__(message)


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that automatically loads configuration from a tiered set of config files.

    This class will load `Bunny.common.yaml` from the directory of the entrypoint that creates it, and will walk the
    filesystem upwards a configurable number of times to find other `Bunny.common.yaml` files. Files closer to the
    entrypoint override the ones further up.

    The discovered files will be merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax.

    Example usage:
        from infra_bunny.lib.config import bunny_env

        bunny_env.get("namespace", "bunny")
        bunny_env.require("phase")

    """

    def __init__(self, limit=5, filename=CONFIG_FILENAME, entrypoint: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param entrypoint: Path to start from, defaults to the file of the ``__main__`` module
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, entrypoint or self._main_entrypoint())))
        logger.debug("Found configs in %s", configs)

        # hiyapyco refuses to load an empty list of files
        if configs:
            self.data = hiyapyco.load([str(path) for path in configs], method=hiyapyco.METHOD_MERGE) or {}

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `BunnyConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise BunnyConfigException(key)

    @staticmethod
    def _main_entrypoint() -> Path:
        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            raise Exception(
                "Can't find __file__ for __main__. HINT: Don't use HierarchicalConfig from a REPL if you are."
            )

        return Path(main_module.__file__).absolute()

    def _discover_configs(self, limit: int, entrypoint: Path) -> list[Path]:
        """
        Walk upwards from the entrypoint to find config files

        :param limit: Max parent directories to walk
        :param entrypoint: The program's entrypoint
        :return: The config files, nearest first
        """
        config_paths = []
        logger.debug("Entrypoint: %s", entrypoint)

        # walk up the directory tree and find any files matching the name
        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root, a config file may exist there but not higher
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


# loaded once on import, so the files are not merged again for every lookup
bunny_env = HierarchicalConfig()
