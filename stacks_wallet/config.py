"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .clarity.principal import parse_contract_id, parse_principal
from .models import Network

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppDetailsConfig:
    """Identity shown by the wallet when the user is asked to connect."""

    name: str = "DefiLlama Adapter"
    icon_url: str = "https://defillama.com/favicon.ico"


@dataclass(frozen=True)
class NetworkConfig:
    api_url: str = "https://api.mainnet.hiro.so"
    timeout: int = 30


@dataclass(frozen=True)
class ProtocolConfig:
    contracts: dict[str, str] = field(default_factory=dict)
    tvl_owners: tuple[str, ...] = ()
    blacklisted_tokens: tuple[str, ...] = ()


@dataclass(frozen=True)
class AppConfig:
    app: AppDetailsConfig = field(default_factory=AppDetailsConfig)
    testnet: bool = False
    networks: dict[str, NetworkConfig] = field(default_factory=dict)
    protocols: dict[str, ProtocolConfig] = field(default_factory=dict)

    @property
    def network(self) -> Network:
        return Network.from_flag(self.testnet)


_DEFAULT_API_URLS = {
    Network.MAINNET.value: "https://api.mainnet.hiro.so",
    Network.TESTNET.value: "https://api.testnet.hiro.so",
}

# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


def _as_bool(value: Any) -> bool:
    # env interpolation turns booleans into strings
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_app(raw: dict[str, Any]) -> AppDetailsConfig:
    return AppDetailsConfig(
        name=raw.get("name", AppDetailsConfig.name),
        icon_url=raw.get("icon_url", AppDetailsConfig.icon_url),
    )


def _build_networks(raw: dict[str, Any]) -> dict[str, NetworkConfig]:
    networks = {
        name: NetworkConfig(api_url=url) for name, url in _DEFAULT_API_URLS.items()
    }
    for name, cfg in raw.items():
        cfg = cfg or {}
        networks[name] = NetworkConfig(
            api_url=cfg.get("api_url", _DEFAULT_API_URLS.get(name, "")).rstrip("/"),
            timeout=int(cfg.get("timeout", 30)),
        )
    return networks


def _build_protocols(raw: dict[str, Any]) -> dict[str, ProtocolConfig]:
    protocols: dict[str, ProtocolConfig] = {}
    for name, cfg in raw.items():
        tvl = cfg.get("tvl", {}) or {}
        protocols[name] = ProtocolConfig(
            contracts=dict(cfg.get("contracts", {}) or {}),
            tvl_owners=tuple(tvl.get("owners", []) or []),
            blacklisted_tokens=tuple(tvl.get("blacklisted_tokens", []) or []),
        )
    return protocols


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        app=_build_app(raw.get("app", {}) or {}),
        testnet=_as_bool(raw.get("testnet", False)),
        networks=_build_networks(raw.get("networks", {}) or {}),
        protocols=_build_protocols(raw.get("protocols", {}) or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    known = {network.value for network in Network}
    for name, network_cfg in cfg.networks.items():
        if name not in known:
            raise ValueError(f"Unknown network '{name}' (expected one of {sorted(known)})")
        if not network_cfg.api_url:
            raise ValueError(f"Network '{name}' has no api_url")

    for network in Network:
        if network.value not in cfg.networks:
            raise ValueError(f"Network '{network.value}' is not configured")

    for proto_name, proto in cfg.protocols.items():
        for key, contract_id in proto.contracts.items():
            try:
                parse_contract_id(contract_id)
            except ValueError as e:
                raise ValueError(
                    f"Protocol '{proto_name}' contract '{key}' is invalid: {e}"
                ) from e
        for owner in proto.tvl_owners:
            try:
                parse_principal(owner)
            except ValueError as e:
                raise ValueError(
                    f"Protocol '{proto_name}' TVL owner {owner!r} is invalid: {e}"
                ) from e
