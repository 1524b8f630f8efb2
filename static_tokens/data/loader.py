# static_tokens/data/loader.py

"""
Loader for the static token tables.

Every table is a YAML file in the data directory. Tables that differ per
network are mappings of ``devnet`` / ``testnet`` / ``mainnet`` to a list of
descriptors; network-independent tables are plain lists. Symbol metadata
tables are mappings keyed by symbol.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar

import msgspec
import yaml
from msgspec import Struct, field

from ..core.logging import StaticTokensLogger, log_with_context
from ..types import (
    Network,
    SourceDataError,
    TokenMeta,
    IbcTokenSource,
    Cw20TokenSource,
    PeggyTokenSource,
    TokenFactorySource,
    FactoryTokenMetadata,
)


T = TypeVar('T', bound=Struct)

TIERS = (Network.DEVNET, Network.TESTNET, Network.MAINNET)


class TokenSources(Struct, kw_only=True):
    """All static source tables, keyed by network tier where they vary per network."""
    evm: List[PeggyTokenSource] = field(default_factory=list)
    spl: List[PeggyTokenSource] = field(default_factory=list)
    ibc: Dict[Network, List[IbcTokenSource]] = field(default_factory=dict)
    cw20: Dict[Network, List[Cw20TokenSource]] = field(default_factory=dict)
    erc20: Dict[Network, List[PeggyTokenSource]] = field(default_factory=dict)
    token_factory: Dict[Network, List[TokenFactorySource]] = field(default_factory=dict)
    symbol_meta: Dict[str, TokenMeta] = field(default_factory=dict)
    untagged_symbol_meta: Dict[str, TokenMeta] = field(default_factory=dict)
    factory_metadata: Dict[Network, List[FactoryTokenMetadata]] = field(default_factory=dict)

    def for_networks(self, table: str, networks) -> list:
        """Concatenate a per-network table over ``networks``, in the given order."""
        by_network = getattr(self, table)
        tokens = []
        for network in networks:
            tokens.extend(by_network.get(network, []))
        return tokens

    def table_counts(self) -> Dict[str, int]:
        counts = {}
        for name in self.__struct_fields__:
            value = getattr(self, name)
            if isinstance(value, dict) and value and isinstance(next(iter(value.values())), list):
                counts[name] = sum(len(tokens) for tokens in value.values())
            else:
                counts[name] = len(value)
        return counts


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise SourceDataError("Data file not found", path=path)

    try:
        with open(path, 'rb') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SourceDataError(f"Failed to parse YAML: {e}", path=path) from e


def _convert(data: Any, type_: Any, path: Path, table: str):
    try:
        return msgspec.convert(data, type=type_)
    except msgspec.ValidationError as e:
        raise SourceDataError(f"Invalid token data: {e}", path=path, table=table) from e


def _load_list(data_dir: Path, table: str, source_type: Type[T]) -> List[T]:
    path = data_dir / f"{table}.yaml"
    data = _read_yaml(path)
    return _convert(data or [], List[source_type], path, table)


def _load_per_network(data_dir: Path, table: str, source_type: Type[T]) -> Dict[Network, List[T]]:
    path = data_dir / f"{table}.yaml"
    data = _read_yaml(path) or {}

    if not isinstance(data, dict):
        raise SourceDataError("Expected a mapping of network to token list", path=path, table=table)

    unknown = set(data) - {tier.value for tier in TIERS}
    if unknown:
        raise SourceDataError(f"Unknown networks: {', '.join(sorted(map(str, unknown)))}", path=path, table=table)

    return {
        Network(name): _convert(tokens or [], List[source_type], path, f"{table}.{name}")
        for name, tokens in data.items()
    }


def _load_symbol_meta(data_dir: Path, table: str) -> Dict[str, TokenMeta]:
    path = data_dir / f"{table}.yaml"
    data = _read_yaml(path)
    return _convert(data or {}, Dict[str, TokenMeta], path, table)


def load_token_sources(data_dir: Path) -> TokenSources:
    logger = StaticTokensLogger.get_logger('data.loader')
    data_dir = Path(data_dir)

    log_with_context(logger, logging.INFO, "Loading static token tables", path=data_dir)

    sources = TokenSources(
        evm=_load_list(data_dir, 'evm', PeggyTokenSource),
        spl=_load_list(data_dir, 'spl', PeggyTokenSource),
        ibc=_load_per_network(data_dir, 'ibc', IbcTokenSource),
        cw20=_load_per_network(data_dir, 'cw20', Cw20TokenSource),
        erc20=_load_per_network(data_dir, 'erc20', PeggyTokenSource),
        token_factory=_load_per_network(data_dir, 'token_factory', TokenFactorySource),
        symbol_meta=_load_symbol_meta(data_dir, 'symbol_meta'),
        untagged_symbol_meta=_load_symbol_meta(data_dir, 'untagged_symbol_meta'),
        factory_metadata=_load_per_network(data_dir, 'factory_metadata', FactoryTokenMetadata),
    )

    for table, count in sources.table_counts().items():
        log_with_context(logger, logging.DEBUG, "Loaded table", table=table, count=count)

    return sources
