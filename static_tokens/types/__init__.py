# static_tokens/types/__init__.py

from .enums import (
    TokenType,
    TokenVerification,
    Network,
    DEFAULT_NETWORKS,
    network_file_name,
)

from .errors import (
    StaticTokensError,
    SourceDataError,
    OutputWriteError,
)

# Source Descriptor Types
from .configs.token import (
    TokenMeta,
    IbcTokenSource,
    Cw20TokenSource,
    PeggyTokenSource,
    TokenFactorySource,
    FactoryTokenMetadata,
)

from .token import TokenStatic, token_from_source
