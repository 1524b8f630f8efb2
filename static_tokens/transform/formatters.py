# static_tokens/transform/formatters.py

"""
Formatters turning raw source descriptors into normalized token records.

Each formatter is a pure function of its inputs: source lists, and for the
CW20 and token factory tables the network and a factory metadata getter.
"""

from typing import Iterable, List, Mapping

from ..types import (
    Network,
    TokenType,
    TokenVerification,
    TokenStatic,
    TokenMeta,
    IbcTokenSource,
    Cw20TokenSource,
    PeggyTokenSource,
    TokenFactorySource,
    SourceDataError,
    token_from_source,
)
from .metadata import MetadataGetter


NATIVE_DENOM = 'inj'
NATIVE_SYMBOL = 'INJ'
PEGGY_PREFIX = 'peggy'


def ibc_denom(hash_: str) -> str:
    return f"ibc/{hash_}"


def factory_denom(creator: str, symbol: str) -> str:
    return f"factory/{creator}/{symbol.lower()}"


def peggy_denom(address: str) -> str:
    return f"{PEGGY_PREFIX}{address}"


def format_ibc_tokens(tokens: Iterable[IbcTokenSource]) -> List[TokenStatic]:
    return [
        token_from_source(
            token,
            denom=ibc_denom(token.hash),
            token_type=TokenType.IBC,
        )
        for token in tokens
    ]


def format_token_factory_tokens(tokens: Iterable[TokenFactorySource],
                                network: Network,
                                get_metadata: MetadataGetter) -> List[TokenStatic]:
    formatted = []

    for token in tokens:
        denom = factory_denom(token.creator, token.symbol)

        existing = get_metadata(denom, network)
        if existing and existing.denom:
            denom = existing.denom

        formatted.append(token_from_source(
            token,
            address=denom,
            denom=denom,
            token_type=TokenType.TOKEN_FACTORY,
            token_verification=TokenVerification.VERIFIED,
        ))

    return formatted


def format_cw20_tokens(tokens: Iterable[Cw20TokenSource],
                       network: Network,
                       get_metadata: MetadataGetter) -> List[TokenStatic]:
    formatted = []

    for token in tokens:
        formatted.append(token_from_source(
            token,
            address=token.address,
            denom=token.address,
            token_type=TokenType.CW20,
            token_verification=TokenVerification.VERIFIED,
        ))

        existing = get_metadata(token.address.lower(), network)
        if existing:
            formatted.append(token_from_source(
                token,
                denom=existing.denom,
                address=token.address,
                token_type=TokenType.TOKEN_FACTORY,
                token_verification=TokenVerification.INTERNAL,
                decimals=existing.decimals or token.decimals,
            ))

    return formatted


def format_spl_tokens(tokens: Iterable[PeggyTokenSource]) -> List[TokenStatic]:
    return [
        token_from_source(token, denom=token.address, token_type=TokenType.SPL)
        for token in tokens
    ]


def format_evm_tokens(tokens: Iterable[PeggyTokenSource]) -> List[TokenStatic]:
    return [
        token_from_source(token, denom=token.address, token_type=TokenType.EVM)
        for token in tokens
    ]


def format_erc20_tokens(tokens: Iterable[PeggyTokenSource]) -> List[TokenStatic]:
    return [
        token_from_source(token, denom=peggy_denom(token.address), token_type=TokenType.ERC20)
        for token in tokens
    ]


def format_symbol_base_tokens(untagged_symbol_meta: Mapping[str, TokenMeta]) -> List[TokenStatic]:
    """Perp market base tokens, addressed by their lowercased symbol."""
    return [
        token_from_source(
            meta,
            token_type=TokenType.SYMBOL,
            denom=meta.symbol.lower(),
            address=meta.symbol.lower(),
        )
        for meta in untagged_symbol_meta.values()
    ]


def native_token(symbol_meta: Mapping[str, TokenMeta]) -> TokenStatic:
    meta = symbol_meta.get(NATIVE_SYMBOL)
    if meta is None:
        raise SourceDataError(f"Missing {NATIVE_SYMBOL} entry", table='symbol_meta')

    return token_from_source(
        meta,
        is_native=True,
        denom=NATIVE_DENOM,
        address=NATIVE_DENOM,
        token_type=TokenType.NATIVE,
        token_verification=TokenVerification.VERIFIED,
    )
