# static_tokens/transform/metadata.py

from typing import Callable, Dict, Iterable, List, Mapping, Optional

from ..types import Network, FactoryTokenMetadata


# (denom or cw20 address, network) -> existing factory registration
MetadataGetter = Callable[[str, Network], Optional[FactoryTokenMetadata]]


class FactoryMetadataIndex:
    """
    Lookup of token factory denoms that were registered for CW20 contracts.

    Entries are matched case-insensitively by their factory denom or by the
    CW20 contract address they wrap. Sentry networks resolve to the table of
    their base network.
    """

    def __init__(self, entries: Mapping[Network, Iterable[FactoryTokenMetadata]]):
        self._by_network: Dict[Network, Dict[str, FactoryTokenMetadata]] = {}

        for network, network_entries in entries.items():
            lookup = self._by_network.setdefault(network.tier, {})
            for entry in network_entries:
                lookup.setdefault(entry.denom.lower(), entry)
                if entry.address:
                    lookup.setdefault(entry.address.lower(), entry)

    def get(self, key: str, network: Network) -> Optional[FactoryTokenMetadata]:
        return self._by_network.get(network.tier, {}).get(key.lower())

    __call__ = get

    def entries(self, network: Network) -> List[FactoryTokenMetadata]:
        unique = {id(entry): entry for entry in self._by_network.get(network.tier, {}).values()}
        return list(unique.values())
