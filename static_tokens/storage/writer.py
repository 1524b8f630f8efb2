# static_tokens/storage/writer.py

"""
Final assembly and JSON output of a network's static token list.
"""

import os
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, List, Union

import msgspec

from ..core.logging import LoggingMixin
from ..types import (
    Network,
    TokenStatic,
    TokenVerification,
    OutputWriteError,
    network_file_name,
)


def finalize_tokens(tokens: Iterable[TokenStatic],
                    preserve_internal_verification: bool = False) -> List[TokenStatic]:
    """
    Fill output defaults and sort by denom.

    ``address`` falls back to the denom and ``isNative`` to false. Every
    record is then marked verified, which also overrides the internal
    marking of CW20-derived factory records unless
    ``preserve_internal_verification`` is set.
    """
    finalized = []

    for token in tokens:
        verification = TokenVerification.VERIFIED
        if preserve_internal_verification and token.token_verification is TokenVerification.INTERNAL:
            verification = TokenVerification.INTERNAL

        finalized.append(msgspec.structs.replace(
            token,
            address=token.address if token.address is not None else token.denom,
            is_native=token.is_native if token.is_native is not None else False,
            token_verification=verification,
        ))

    finalized.sort(key=lambda token: token.denom)
    return finalized


def find_duplicate_denoms(tokens: Iterable[TokenStatic]) -> List[str]:
    counts = Counter(token.denom for token in tokens)
    return sorted(denom for denom, count in counts.items() if count > 1)


def write_json_file(path: Union[str, Path], data: Any) -> Path:
    """Replace ``path`` with the pretty-printed JSON encoding of ``data``."""
    path = Path(path)

    try:
        os.makedirs(path.parent, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(msgspec.json.format(msgspec.json.encode(data), indent=2) + b"\n")
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e

    return path


class StaticTokenWriter(LoggingMixin):
    """Writes one ``<network>.json`` file per network into ``output_dir``."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def path_for(self, network: Network) -> Path:
        return self.output_dir / f"{network_file_name(network)}.json"

    def write(self, network: Network, tokens: List[TokenStatic]) -> Path:
        duplicates = find_duplicate_denoms(tokens)
        if duplicates:
            self.log_warning("Duplicate denoms in static token list",
                             network=network.value, count=len(duplicates))
            for denom in duplicates:
                self.log_debug("Duplicate denom", network=network.value, denom=denom)

        path = write_json_file(self.path_for(network), tokens)

        self.log_info("Static token list written",
                      network=network.value, path=path, count=len(tokens))
        return path
