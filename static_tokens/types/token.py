# static_tokens/types/token.py

from typing import Any, Optional

import msgspec
from msgspec import Struct

from .enums import TokenType, TokenVerification


class TokenStatic(Struct, kw_only=True, rename="camel", omit_defaults=True):
    """
    Normalized token record as written to the static token list.

    Field order is the JSON key order: address and isNative lead, then the
    source fields, then the computed denom, type and verification.
    """
    address: Optional[str] = None
    is_native: Optional[bool] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    symbol: str
    decimals: int
    coin_gecko_id: Optional[str] = None
    external_logo: Optional[str] = None
    hash: Optional[str] = None
    path: Optional[str] = None
    channel_id: Optional[str] = None
    base_denom: Optional[str] = None
    creator: Optional[str] = None
    denom: str
    token_type: TokenType
    token_verification: Optional[TokenVerification] = None


def token_from_source(source: Struct, **overrides: Any) -> TokenStatic:
    """Spread a source descriptor into a token record, then apply overrides."""
    fields = msgspec.structs.asdict(source)
    fields.update(overrides)
    return TokenStatic(**fields)
