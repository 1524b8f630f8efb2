# static_tokens/types/configs/token.py

from typing import Optional

from msgspec import Struct


class TokenMeta(Struct, kw_only=True, rename="camel"):
    symbol: str
    decimals: int
    name: Optional[str] = None
    logo: Optional[str] = None
    coin_gecko_id: Optional[str] = None
    external_logo: Optional[str] = None


class IbcTokenSource(TokenMeta, kw_only=True):
    hash: str
    path: Optional[str] = None
    channel_id: Optional[str] = None
    base_denom: Optional[str] = None
    is_native: Optional[bool] = None


class Cw20TokenSource(TokenMeta, kw_only=True):
    address: str


class PeggyTokenSource(TokenMeta, kw_only=True):
    """Bridged token addressed by its origin-chain address (SPL, EVM and ERC20 tables)."""
    address: str


class TokenFactorySource(TokenMeta, kw_only=True):
    creator: str


class FactoryTokenMetadata(Struct, kw_only=True, rename="camel"):
    """Token factory denom already registered for a CW20 contract."""
    denom: str
    address: Optional[str] = None
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
