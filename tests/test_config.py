from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import dacite
import pytest
from pulumi import runtime

from infra_bunny.lib.config import (
    BunnyConfigException,
    HierarchicalConfig,
    bunny_config,
    bunny_env,
    get_environment,
    get_provider_settings,
    get_stack_config,
    get_user_agent,
)
from infra_bunny.lib.config.bunny_env import CONFIG_FILENAME
from infra_bunny.lib.provider.settings import API_KEY_ENV_VAR, DEFAULT_CREATE_TIMEOUT
from infra_bunny.modules.bunny.cdn.config import CdnArgs
from infra_bunny.modules.bunny.cdn.types import Action, Matching, PricingType


@pytest.fixture
def env(monkeypatch):
    """Replace the contents of the loaded Bunny.common.yaml files"""
    data = {}
    monkeypatch.setattr(bunny_env, "data", data)
    return data


@pytest.fixture
def stack_config(monkeypatch):
    """Replace the Pulumi stack config"""
    values = {}
    monkeypatch.setattr(runtime.config, "CONFIG", values)
    return values


@pytest.fixture
def provider_config(monkeypatch):
    """Replace the values of the `bunny` config namespace"""
    values = {}
    monkeypatch.setattr(bunny_config, "get", lambda key, *args, **kwargs: values.get(key))
    monkeypatch.setattr(bunny_config, "get_float", lambda key, *args, **kwargs: values.get(key))
    return values


class TestHierarchicalConfig:
    """Tests for merging the config files found above the entrypoint"""

    def test_nearest_file_wins(self, tmp_path):
        (tmp_path / ".git").mkdir()
        (tmp_path / CONFIG_FILENAME).write_text("namespace: oh\nphase: prod\n")
        stack_dir = tmp_path / "sysenvs" / "oh-dev"
        stack_dir.mkdir(parents=True)
        (stack_dir / CONFIG_FILENAME).write_text("phase: dev\n")

        config = HierarchicalConfig(entrypoint=stack_dir / "bunny.py")

        assert config["namespace"] == "oh"
        assert config["phase"] == "dev"

    def test_stops_at_project_root(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("namespace: outside\n")
        project = tmp_path / "project"
        (project / ".git").mkdir(parents=True)

        config = HierarchicalConfig(entrypoint=project / "bunny.py")

        assert "namespace" not in config

    def test_limit(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("namespace: far\n")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)

        assert HierarchicalConfig(limit=1, entrypoint=deep / "bunny.py").get("namespace") is None
        assert HierarchicalConfig(limit=4, entrypoint=deep / "bunny.py").get("namespace") == "far"

    def test_require(self, tmp_path):
        (tmp_path / ".git").mkdir()
        config = HierarchicalConfig(entrypoint=tmp_path / "bunny.py")

        with pytest.raises(BunnyConfigException, match="Missing required configuration variable 'phase'"):
            config.require("phase")


class TestEnvironment:
    def test_default_environment(self, env):
        env.update(namespace="oh", phase="dev")

        assert get_environment() == "oh-dev"
        assert get_user_agent() == "infra-bunny oh-dev"

    def test_overrides(self, env):
        env.update(phase="dev", environment="shared", user_agent_suffix="platform-team")

        assert get_environment() == "shared"
        assert get_user_agent() == "infra-bunny shared platform-team"

    def test_phase_required(self, env):
        with pytest.raises(BunnyConfigException):
            get_environment()


class TestProviderSettings:
    """Tests for building the provider settings from the `bunny` config namespace"""

    def test_configured(self, env, provider_config):
        env.update(namespace="oh", phase="dev")
        provider_config.update(apiKey="configured-key", apiUrl="https://bunny.example.com", createTimeout=60.0)

        settings = get_provider_settings.__wrapped__()

        assert settings.api_key == "configured-key"
        assert settings.base_url == "https://bunny.example.com"
        assert settings.create_timeout == 60.0
        assert settings.user_agent == "infra-bunny oh-dev"

    def test_env_key_is_not_stored(self, env, provider_config, monkeypatch):
        env.update(phase="dev")
        monkeypatch.setenv(API_KEY_ENV_VAR, "env-key")

        settings = get_provider_settings.__wrapped__()

        assert settings.api_key is None
        assert settings.create_timeout == DEFAULT_CREATE_TIMEOUT
        assert settings.base_url == "https://api.bunny.net"

    def test_missing_key(self, env, provider_config, monkeypatch):
        env.update(phase="dev")
        monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)

        with pytest.raises(BunnyConfigException, match=f"'bunny:apiKey' \\(or environment variable '{API_KEY_ENV_VAR}'\\)"):
            get_provider_settings.__wrapped__()


class Color(Enum):
    red = "red"
    blue = "blue"


@dataclass
class Paint:
    color: Color
    coats: int = 1
    brand: Optional[str] = None
    tags: list[str] = field(default_factory=list)


class TestStackConfig:
    """Tests for mapping the stack config onto the module config dataclass"""

    def test_json_values_are_parsed(self, stack_config):
        stack_config.update({"paint:color": "blue", "paint:coats": "2", "paint:tags": '["a", "b"]', "other:x": "1"})

        assert get_stack_config("paint", Paint) == Paint(color=Color.blue, coats=2, tags=["a", "b"])

    def test_unknown_keys_are_rejected(self, stack_config):
        stack_config.update({"paint:color": "red", "paint:colour": "red"})

        with pytest.raises(dacite.UnexpectedDataError):
            get_stack_config("paint", Paint)

    def test_invalid_enum_value(self, stack_config):
        stack_config.update({"paint:color": "green"})

        with pytest.raises(ValueError):
            get_stack_config("paint", Paint)

    def test_cdn_config(self, stack_config):
        stack_config["cdn:pull_zones"] = """[
            {
                "name": "assets",
                "origin_url": "https://origin.example.com",
                "type": "volume",
                "options": {"enable_logging": false},
                "hostnames": [{"hostname": "cdn.example.com", "load_free_certificate": true}],
                "edge_rules": [
                    {
                        "name": "block-admin",
                        "action_type": "block_request",
                        "triggers": [{"type": "url", "pattern_matches": ["*/admin/*"]}]
                    }
                ]
            }
        ]"""

        config = get_stack_config("cdn", CdnArgs)

        (pull_zone,) = config.pull_zones
        assert pull_zone.type is PricingType.volume
        assert pull_zone.options == {"enable_logging": False}
        assert pull_zone.hostnames[0].load_free_certificate is True
        assert pull_zone.hostnames[0].certificate is None

        (edge_rule,) = pull_zone.edge_rules
        assert edge_rule.action_type is Action.block_request
        assert edge_rule.trigger_matching_type is Matching.all
        assert edge_rule.triggers[0].pattern_matching_type is Matching.any
        assert config.lookup_pull_zones == []
