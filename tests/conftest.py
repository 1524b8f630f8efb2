# tests/conftest.py
"""
pytest fixtures for the static token generator
"""

import logging

import pytest

from static_tokens.core.logging import StaticTokensLogger, ROOT_LOGGER_NAME
from static_tokens.data.loader import TokenSources
from static_tokens.transform.metadata import FactoryMetadataIndex
from static_tokens.types import (
    Network,
    TokenMeta,
    IbcTokenSource,
    Cw20TokenSource,
    PeggyTokenSource,
    TokenFactorySource,
    FactoryTokenMetadata,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger(ROOT_LOGGER_NAME).handlers.clear()
    StaticTokensLogger._configured = False


@pytest.fixture
def symbol_meta():
    return {
        'INJ': TokenMeta(name='Injective', symbol='INJ', decimals=18, logo='inj.png'),
        'USDT': TokenMeta(name='Tether', symbol='USDT', decimals=6),
    }


@pytest.fixture
def sources(symbol_meta):
    return TokenSources(
        evm=[PeggyTokenSource(address='0xEvmUsdt', symbol='USDT', decimals=6)],
        spl=[PeggyTokenSource(address='SoLMint111', symbol='SOL', decimals=8)],
        ibc={
            Network.TESTNET: [IbcTokenSource(hash='TESTATOM', symbol='ATOM', decimals=6)],
            Network.MAINNET: [IbcTokenSource(hash='MAINATOM', symbol='ATOM', decimals=6,
                                             channel_id='channel-1', base_denom='uatom')],
        },
        cw20={
            Network.DEVNET: [Cw20TokenSource(address='inj1devcw20', symbol='DEV', decimals=6)],
            Network.TESTNET: [Cw20TokenSource(address='inj1testcw20', symbol='TST', decimals=6)],
            Network.MAINNET: [Cw20TokenSource(address='cw20abc', symbol='FOO', decimals=6)],
        },
        erc20={
            Network.DEVNET: [PeggyTokenSource(address='0xDev', symbol='DWETH', decimals=18)],
            Network.TESTNET: [PeggyTokenSource(address='0xTest', symbol='TUSDT', decimals=6)],
            Network.MAINNET: [PeggyTokenSource(address='0xMain', symbol='USDT', decimals=6)],
        },
        token_factory={
            Network.DEVNET: [TokenFactorySource(creator='inj1dev', symbol='DEVTF', decimals=6)],
            Network.TESTNET: [TokenFactorySource(creator='inj1test', symbol='TestTF', decimals=6)],
            Network.MAINNET: [TokenFactorySource(creator='inj1main', symbol='NINJA', decimals=6)],
        },
        symbol_meta=symbol_meta,
        untagged_symbol_meta={
            'BTC': TokenMeta(name='Bitcoin', symbol='BTC', decimals=8),
        },
        factory_metadata={
            Network.TESTNET: [
                FactoryTokenMetadata(denom='factory/adapter/inj1testcw20', address='inj1testcw20'),
            ],
            Network.MAINNET: [
                FactoryTokenMetadata(denom='factory/x/foo', address='cw20abc', decimals=8),
            ],
        },
    )


@pytest.fixture
def metadata_index(sources):
    return FactoryMetadataIndex(sources.factory_metadata)


class RecordingGetter:
    """Metadata getter stub that records every lookup."""

    def __init__(self, entries=None):
        self.entries = entries or {}
        self.calls = []

    def __call__(self, key, network):
        self.calls.append((key, network))
        return self.entries.get(key)


@pytest.fixture
def recording_getter():
    return RecordingGetter
