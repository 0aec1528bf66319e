"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from stacks_wallet.config import (
    AppConfig,
    AppDetailsConfig,
    NetworkConfig,
    ProtocolConfig,
)
from tests.helpers import (
    ARKADIKO_DEPLOYER,
    DIKO_TOKEN,
    ORACLE,
    SWAP,
    USDA_TOKEN,
    VAULTS_MANAGER,
    VAULTS_POOL,
    FakeCodec,
    FakeSignerAgent,
)

# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_protocol_config() -> ProtocolConfig:
    return ProtocolConfig(
        contracts={
            "vaults_pool": VAULTS_POOL,
            "swap": SWAP,
            "vaults_manager": VAULTS_MANAGER,
            "oracle": ORACLE,
            "diko_token": DIKO_TOKEN,
            "usda_token": USDA_TOKEN,
        },
        tvl_owners=(VAULTS_POOL, SWAP),
        blacklisted_tokens=(
            f"{ARKADIKO_DEPLOYER}.wrapped-stx-token::wstx",
            f"stacks:{DIKO_TOKEN}::diko",
            f"{USDA_TOKEN}::usda",
        ),
    )


@pytest.fixture()
def sample_app_config(sample_protocol_config: ProtocolConfig) -> AppConfig:
    return AppConfig(
        app=AppDetailsConfig(
            name="Arkadiko Protocol", icon_url="https://arkadiko.finance/favicon.ico"
        ),
        testnet=False,
        networks={
            "mainnet": NetworkConfig(api_url="https://api.mainnet.example.com", timeout=10),
            "testnet": NetworkConfig(api_url="https://api.testnet.example.com", timeout=10),
        },
        protocols={"arkadiko": sample_protocol_config},
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent(f"""\
    app:
      name: Arkadiko Protocol
      icon_url: https://arkadiko.finance/favicon.ico
    testnet: false
    networks:
      mainnet:
        api_url: https://api.mainnet.example.com/
        timeout: 10
      testnet:
        api_url: https://api.testnet.example.com
    protocols:
      arkadiko:
        contracts:
          vaults_manager: {VAULTS_MANAGER}
          swap: {SWAP}
          oracle: {ORACLE}
        tvl:
          owners: [{VAULTS_POOL}, {SWAP}]
          blacklisted_tokens:
            - stacks:{DIKO_TOKEN}::diko
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


@pytest.fixture()
def approving_agent() -> FakeSignerAgent:
    return FakeSignerAgent("approve")


@pytest.fixture()
def cancelling_agent() -> FakeSignerAgent:
    return FakeSignerAgent("cancel")


@pytest.fixture()
def fake_codec() -> FakeCodec:
    return FakeCodec()
