"""
Formatting and aggregation of the static token tables into token records.
"""

from .metadata import FactoryMetadataIndex, MetadataGetter
from .aggregator import NETWORK_PROFILES, FORMAT_PRECEDENCE, build_static_token_list

__all__ = [
    'FactoryMetadataIndex',
    'MetadataGetter',
    'NETWORK_PROFILES',
    'FORMAT_PRECEDENCE',
    'build_static_token_list',
]
