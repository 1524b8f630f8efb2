# tests/test_loader.py

import shutil

import pytest

from static_tokens.core.config import DEFAULT_DATA_DIR
from static_tokens.data.loader import load_token_sources
from static_tokens.types import Network, SourceDataError, Cw20TokenSource


@pytest.fixture
def data_dir(tmp_path):
    target = tmp_path / 'data'
    shutil.copytree(DEFAULT_DATA_DIR, target, ignore=shutil.ignore_patterns('*.py', '__pycache__'))
    return target


def test_bundled_tables_load():
    sources = load_token_sources(DEFAULT_DATA_DIR)

    assert 'INJ' in sources.symbol_meta
    assert sources.symbol_meta['INJ'].decimals == 18
    assert set(sources.cw20) == {Network.DEVNET, Network.TESTNET, Network.MAINNET}
    assert set(sources.ibc) == {Network.TESTNET, Network.MAINNET}
    assert all(isinstance(token, Cw20TokenSource) for token in sources.cw20[Network.MAINNET])
    assert sources.ibc[Network.MAINNET][0].channel_id == 'channel-1'
    assert sources.evm and sources.spl and sources.untagged_symbol_meta


def test_table_counts(data_dir):
    (data_dir / 'cw20.yaml').write_text(
        "testnet:\n"
        "  - {address: inj1a, symbol: A, decimals: 6}\n"
        "mainnet:\n"
        "  - {address: inj1b, symbol: B, decimals: 6}\n"
        "  - {address: inj1c, symbol: C, decimals: 6}\n"
    )

    counts = load_token_sources(data_dir).table_counts()

    assert counts['cw20'] == 3
    assert counts['symbol_meta'] >= 1


def test_empty_per_network_table(data_dir):
    (data_dir / 'erc20.yaml').write_text("")

    assert load_token_sources(data_dir).erc20 == {}


def test_missing_table_raises(data_dir):
    (data_dir / 'spl.yaml').unlink()

    with pytest.raises(SourceDataError, match='spl.yaml'):
        load_token_sources(data_dir)


def test_invalid_descriptor_names_table(data_dir):
    (data_dir / 'cw20.yaml').write_text(
        "mainnet:\n"
        "  - symbol: FOO\n"
        "    decimals: 6\n"
    )

    with pytest.raises(SourceDataError) as exc_info:
        load_token_sources(data_dir)

    assert exc_info.value.table == 'cw20.mainnet'
    assert 'address' in str(exc_info.value)


def test_unknown_network_raises(data_dir):
    (data_dir / 'token_factory.yaml').write_text("staging: []\n")

    with pytest.raises(SourceDataError, match='staging'):
        load_token_sources(data_dir)


def test_invalid_yaml_raises(data_dir):
    (data_dir / 'evm.yaml').write_text("- address: [unclosed\n")

    with pytest.raises(SourceDataError, match='Failed to parse YAML'):
        load_token_sources(data_dir)


def test_undecodable_file_raises(data_dir):
    (data_dir / 'evm.yaml').write_bytes(b"- address: '0x1'\n  symbol: \xff\xfe\n  decimals: 6\n")

    with pytest.raises(SourceDataError, match='evm.yaml'):
        load_token_sources(data_dir)


def test_non_string_network_key_raises(data_dir):
    (data_dir / 'cw20.yaml').write_text("1: []\nmainnet: []\n")

    with pytest.raises(SourceDataError, match='Unknown networks: 1'):
        load_token_sources(data_dir)
