import pytest

from infra_bunny.module_manager import LazyModule, module_manager
from infra_bunny.module_manager.discover_modules import discover_modules
from infra_bunny.module_manager.module_manager import _ModuleManager
from infra_bunny.modules.bunny.cdn import Cdn
from infra_bunny.modules.bunny.cdn.config import CdnArgs
from infra_bunny.modules.bunny.storage.config import StorageArgs
from infra_bunny.modules.bunny.video.config import VideoArgs


class TestDiscovery:
    def test_discovers_bunny_modules(self):
        modules = discover_modules()

        assert set(modules["bunny"]) == {"cdn", "storage", "video"}
        assert modules["bunny"]["cdn"] == LazyModule("bunny", "cdn")

    def test_custom_package_path(self, tmp_path):
        (tmp_path / "modules" / "bunny" / "edge_scripts").mkdir(parents=True)
        (tmp_path / "modules" / "bunny" / "__pycache__").mkdir()

        assert discover_modules(tmp_path) == {"bunny": {"edge-scripts": LazyModule("bunny", "edge_scripts")}}


class TestLazyModule:
    def test_finds_module_class(self):
        assert LazyModule("bunny", "cdn").Module is Cdn
        assert LazyModule("bunny", "cdn").import_path == "infra_bunny.modules.bunny.cdn"

    @pytest.mark.parametrize(
        "name, config_type",
        [("cdn", CdnArgs), ("storage", StorageArgs), ("video", VideoArgs)],
    )
    def test_config_type(self, name, config_type):
        """The config dataclass is the type hint of the `config` parameter of `build`."""
        assert module_manager.get_module("bunny", name).Module.get_config_type() is config_type


class TestModuleManager:
    def test_unknown_module(self):
        with pytest.raises(ModuleNotFoundError, match="module `dns` was not found under provider `bunny`"):
            module_manager.get_module("bunny", "dns")

    def test_explicit_modules(self):
        manager = _ModuleManager({"bunny": {"cdn": LazyModule("bunny", "cdn")}})

        assert manager.get_provider_modules("bunny") == {"cdn": LazyModule("bunny", "cdn")}
        assert manager.get_provider_modules("fastly") == {}
        assert manager.get_module("bunny", "cdn") == LazyModule("bunny", "cdn")

    def test_unknown_module_lists_known_ones(self):
        manager = _ModuleManager({"bunny": {"cdn": LazyModule("bunny", "cdn")}})

        with pytest.raises(ModuleNotFoundError, match=r"known modules are \['cdn'\]"):
            manager.get_module("bunny", "video")
