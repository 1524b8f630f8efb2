# static_tokens/types/enums.py

import enum


class TokenType(enum.Enum):
    NATIVE = "native"
    IBC = "ibc"
    CW20 = "cw20"
    TOKEN_FACTORY = "tokenFactory"
    ERC20 = "erc20"
    SPL = "spl"
    EVM = "evm"
    SYMBOL = "symbol"


class TokenVerification(enum.Enum):
    VERIFIED = "verified"
    INTERNAL = "internal"


class Network(enum.Enum):
    DEVNET = "devnet"
    TESTNET = "testnet"
    TESTNET_SENTRY = "testnet-sentry"
    MAINNET = "mainnet"
    MAINNET_SENTRY = "mainnet-sentry"

    @property
    def tier(self) -> "Network":
        """Base network this one belongs to (sentry nodes fold into their network)."""
        if self in (Network.TESTNET, Network.TESTNET_SENTRY):
            return Network.TESTNET
        if self in (Network.MAINNET, Network.MAINNET_SENTRY):
            return Network.MAINNET
        return Network.DEVNET


# Networks generated by a default run, in order
DEFAULT_NETWORKS = (Network.DEVNET, Network.TESTNET, Network.MAINNET)


def network_file_name(network: Network) -> str:
    return network.tier.value
