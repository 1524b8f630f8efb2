# static_tokens/core/config.py

import os
import logging
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv
from msgspec import Struct

from ..types import Network, DEFAULT_NETWORKS
from .logging import StaticTokensLogger, log_with_context


PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DATA_DIR = PACKAGE_ROOT / 'data'
DEFAULT_OUTPUT_DIR = Path('tokens') / 'staticTokens'

ENV_PREFIX = 'STATIC_TOKENS_'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class GeneratorConfig(Struct, kw_only=True):
    data_dir: Path = DEFAULT_DATA_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    networks: Tuple[Network, ...] = DEFAULT_NETWORKS
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    # Keep the internal marking on CW20-derived factory records instead of
    # forcing every record to verified.
    preserve_internal_verification: bool = False

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None) -> 'GeneratorConfig':
        logger = StaticTokensLogger.get_logger('core.config')

        if env_vars is None:
            load_dotenv()
            env_vars = os.environ
        env = env_vars

        log_dir = env.get(f'{ENV_PREFIX}LOG_DIR')

        config = cls(
            data_dir=Path(env.get(f'{ENV_PREFIX}DATA_DIR') or DEFAULT_DATA_DIR),
            output_dir=Path(env.get(f'{ENV_PREFIX}OUTPUT_DIR') or DEFAULT_OUTPUT_DIR),
            log_level=env.get(f'{ENV_PREFIX}LOG_LEVEL', 'INFO').upper(),
            log_dir=Path(log_dir) if log_dir else None,
            preserve_internal_verification=(
                env.get(f'{ENV_PREFIX}PRESERVE_INTERNAL', 'false').strip().lower() in _TRUE_VALUES
            ),
        )

        log_with_context(logger, logging.DEBUG, "Generator configuration loaded",
                         path=config.data_dir)
        return config
