# static_tokens/transform/aggregator.py

from typing import Dict, List, Tuple

from msgspec import Struct

from ..data.loader import TokenSources
from ..types import Network, TokenStatic
from .formatters import (
    format_evm_tokens,
    format_spl_tokens,
    format_ibc_tokens,
    format_cw20_tokens,
    format_erc20_tokens,
    format_token_factory_tokens,
)
from .metadata import MetadataGetter


class NetworkProfile(Struct, frozen=True, kw_only=True):
    """Which per-network source tables feed a network's list, and in what order."""
    metadata_network: Network
    ibc: Tuple[Network, ...]
    cw20: Tuple[Network, ...]
    erc20: Tuple[Network, ...]
    token_factory: Tuple[Network, ...]


NETWORK_PROFILES: Dict[Network, NetworkProfile] = {
    Network.DEVNET: NetworkProfile(
        metadata_network=Network.DEVNET,
        ibc=(Network.TESTNET, Network.MAINNET),
        cw20=(Network.DEVNET, Network.TESTNET, Network.MAINNET),
        erc20=(Network.DEVNET, Network.TESTNET, Network.MAINNET),
        token_factory=(Network.DEVNET, Network.TESTNET, Network.MAINNET),
    ),
    Network.TESTNET: NetworkProfile(
        metadata_network=Network.TESTNET_SENTRY,
        ibc=(Network.TESTNET, Network.MAINNET),
        cw20=(Network.TESTNET, Network.DEVNET, Network.MAINNET),
        erc20=(Network.TESTNET, Network.DEVNET, Network.MAINNET),
        token_factory=(Network.TESTNET, Network.DEVNET, Network.MAINNET),
    ),
    Network.MAINNET: NetworkProfile(
        metadata_network=Network.MAINNET_SENTRY,
        ibc=(Network.MAINNET,),
        cw20=(Network.MAINNET, Network.TESTNET),
        erc20=(Network.MAINNET,),
        token_factory=(Network.MAINNET,),
    ),
}

FORMAT_PRECEDENCE = ('evm', 'spl', 'ibc', 'cw20', 'erc20', 'token_factory')


def get_network_profile(network: Network) -> NetworkProfile:
    return NETWORK_PROFILES[network.tier]


def _format_table(table: str, sources: TokenSources, profile: NetworkProfile,
                  get_metadata: MetadataGetter) -> List[TokenStatic]:
    if table == 'evm':
        return format_evm_tokens(sources.evm)
    if table == 'spl':
        return format_spl_tokens(sources.spl)
    if table == 'ibc':
        return format_ibc_tokens(sources.for_networks('ibc', profile.ibc))
    if table == 'cw20':
        return format_cw20_tokens(
            sources.for_networks('cw20', profile.cw20),
            profile.metadata_network,
            get_metadata,
        )
    if table == 'erc20':
        return format_erc20_tokens(sources.for_networks('erc20', profile.erc20))
    if table == 'token_factory':
        return format_token_factory_tokens(
            sources.for_networks('token_factory', profile.token_factory),
            profile.metadata_network,
            get_metadata,
        )
    raise ValueError(f"Unknown source table: {table}")


def build_static_token_list(network: Network, sources: TokenSources,
                            get_metadata: MetadataGetter) -> List[TokenStatic]:
    """Formatted tokens for ``network`` in precedence order, before finalization."""
    profile = get_network_profile(network)

    tokens = []
    for table in FORMAT_PRECEDENCE:
        tokens.extend(_format_table(table, sources, profile, get_metadata))
    return tokens
