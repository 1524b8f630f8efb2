# static_tokens/__init__.py

from typing import Dict, Iterable, Optional
from pathlib import Path

from .core.config import GeneratorConfig
from .core.logging import StaticTokensLogger
from .pipeline.generator import StaticTokenGenerator
from .types import Network


def create_generator(config: Optional[GeneratorConfig] = None) -> StaticTokenGenerator:
    config = config or GeneratorConfig.from_env()
    StaticTokensLogger.configure(log_dir=config.log_dir, log_level=config.log_level)
    return StaticTokenGenerator.from_config(config)


def generate_static_tokens(networks: Optional[Iterable[Network]] = None,
                           config: Optional[GeneratorConfig] = None) -> Dict[Network, Path]:
    config = config or GeneratorConfig.from_env()
    return create_generator(config).generate_all(networks or config.networks)
