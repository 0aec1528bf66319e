"""Unit tests for config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from stacks_wallet.config import (
    AppConfig,
    AppDetailsConfig,
    NetworkConfig,
    ProtocolConfig,
    _as_bool,
    _interpolate_env,
    load_config,
)
from stacks_wallet.models import Network
from tests.helpers import DIKO_TOKEN, SWAP, VAULTS_MANAGER, VAULTS_POOL


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}") == "hello"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested_dict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOK", "secret")
        result = _interpolate_env({"key": "${TOK}", "plain": "text"})
        assert result == {"key": "secret", "plain": "text"}

    def test_nested_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A", "x")
        assert _interpolate_env(["${A}", "y"]) == ["x", "y"]

    def test_non_string_passthrough(self) -> None:
        assert _interpolate_env(42) == 42
        assert _interpolate_env(True) is True


class TestAsBool:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", True])
    def test_truthy(self, raw) -> None:
        assert _as_bool(raw) is True

    @pytest.mark.parametrize("raw", ["", "false", "0", "no", False, None])
    def test_falsy(self, raw) -> None:
        assert _as_bool(raw) is False


class TestLoadConfig:
    def test_loads_valid_yaml(self, sample_yaml_path: Path) -> None:
        cfg = load_config(sample_yaml_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.app.name == "Arkadiko Protocol"
        assert cfg.testnet is False
        assert cfg.network is Network.MAINNET
        assert cfg.networks["mainnet"].api_url == "https://api.mainnet.example.com"
        assert cfg.networks["mainnet"].timeout == 10
        assert cfg.networks["testnet"].timeout == 30
        arkadiko = cfg.protocols["arkadiko"]
        assert arkadiko.contracts["vaults_manager"] == VAULTS_MANAGER
        assert arkadiko.tvl_owners == (VAULTS_POOL, SWAP)
        assert arkadiko.blacklisted_tokens == (f"stacks:{DIKO_TOKEN}::diko",)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")

    def test_defaults_for_empty_file(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("")
        cfg = load_config(cfg_file)
        assert cfg.app == AppDetailsConfig()
        assert cfg.networks["mainnet"].api_url == "https://api.mainnet.hiro.so"
        assert cfg.networks["testnet"].api_url == "https://api.testnet.hiro.so"
        assert cfg.protocols == {}

    def test_env_interpolation_in_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("STACKS_TESTNET", "true")
        monkeypatch.setenv("TESTNET_API", "https://stacks-node.internal")
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text(
            "testnet: ${STACKS_TESTNET}\n"
            "networks:\n"
            "  testnet:\n"
            "    api_url: ${TESTNET_API}\n"
        )
        cfg = load_config(cfg_file)
        assert cfg.testnet is True
        assert cfg.network is Network.TESTNET
        assert cfg.networks["testnet"].api_url == "https://stacks-node.internal"

    def test_shipped_config_is_valid(self) -> None:
        cfg = load_config(Path(__file__).resolve().parents[2] / "config.yaml")
        assert "vaults_manager" in cfg.protocols["arkadiko"].contracts


class TestValidation:
    def test_unknown_network_raises(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("networks:\n  devnet:\n    api_url: http://localhost:3999\n")
        with pytest.raises(ValueError, match="Unknown network 'devnet'"):
            load_config(cfg_file)

    def test_bad_contract_raises(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text(
            "protocols:\n"
            "  arkadiko:\n"
            "    contracts:\n"
            "      oracle: not-a-contract\n"
        )
        with pytest.raises(ValueError, match="contract 'oracle' is invalid"):
            load_config(cfg_file)

    def test_bad_tvl_owner_raises(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text(
            "protocols:\n"
            "  arkadiko:\n"
            "    tvl:\n"
            "      owners: [nobody]\n"
        )
        with pytest.raises(ValueError, match="TVL owner"):
            load_config(cfg_file)


class TestFrozenConfigs:
    def test_network_config_immutable(self) -> None:
        n = NetworkConfig()
        with pytest.raises(AttributeError):
            n.timeout = 999  # type: ignore[misc]

    def test_protocol_config_immutable(self) -> None:
        p = ProtocolConfig()
        with pytest.raises(AttributeError):
            p.tvl_owners = ("x",)  # type: ignore[misc]
