# static_tokens/pipeline/generator.py

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from msgspec import Struct

from ..core.config import GeneratorConfig
from ..core.logging import LoggingMixin
from ..data.loader import TokenSources, load_token_sources
from ..storage.writer import StaticTokenWriter, finalize_tokens
from ..transform.aggregator import build_static_token_list
from ..transform.formatters import native_token, format_symbol_base_tokens
from ..transform.metadata import FactoryMetadataIndex, MetadataGetter
from ..types import Network, TokenStatic, StaticTokensError


class GeneratedList(Struct, frozen=True, kw_only=True):
    network: Network
    path: Path
    token_count: int


class StaticTokenGenerator(LoggingMixin):
    """
    Builds and writes the static token list for each network.

    Each network run is independent: the source tables are only read, and
    every run produces its own output file.
    """

    def __init__(self,
                 sources: TokenSources,
                 writer: StaticTokenWriter,
                 get_metadata: Optional[MetadataGetter] = None,
                 preserve_internal_verification: bool = False):
        self.sources = sources
        self.writer = writer
        self.get_metadata = get_metadata or FactoryMetadataIndex(sources.factory_metadata)
        self.preserve_internal_verification = preserve_internal_verification

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> 'StaticTokenGenerator':
        sources = load_token_sources(config.data_dir)
        return cls(
            sources=sources,
            writer=StaticTokenWriter(config.output_dir),
            preserve_internal_verification=config.preserve_internal_verification,
        )

    def build(self, network: Network) -> List[TokenStatic]:
        tokens = [
            native_token(self.sources.symbol_meta),
            *build_static_token_list(network, self.sources, self.get_metadata),
            *format_symbol_base_tokens(self.sources.untagged_symbol_meta),
        ]

        self.log_debug("Formatted static tokens", network=network.value, count=len(tokens))

        return finalize_tokens(tokens, self.preserve_internal_verification)

    def generate(self, network: Network) -> GeneratedList:
        try:
            tokens = self.build(network)
            path = self.writer.write(network, tokens)
        except StaticTokensError as e:
            self.log_error("Static token generation failed", network=network.value, error=str(e))
            raise

        return GeneratedList(network=network, path=path, token_count=len(tokens))

    def generate_all(self, networks: Iterable[Network]) -> Dict[Network, Path]:
        return {network: self.generate(network).path for network in networks}
