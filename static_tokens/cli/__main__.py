# static_tokens/cli/__main__.py

"""
Static Token List CLI

Usage: python -m static_tokens.cli [command] [options]

Builds the per-network static token lists from the bundled token tables.
"""

import click

from static_tokens.core.config import GeneratorConfig
from static_tokens.core.logging import StaticTokensLogger


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, verbose):
    """Static token list generator

    Merges the native, IBC, CW20, ERC20, SPL, EVM, token factory and
    symbol-tagged token tables into one sorted JSON list per network.
    """
    ctx.ensure_object(dict)

    config = GeneratorConfig.from_env()
    log_level = "DEBUG" if verbose else config.log_level

    StaticTokensLogger.configure(
        log_dir=config.log_dir,
        log_level=log_level,
        force=True,
    )

    ctx.obj['config'] = config


from static_tokens.cli.commands.generate import generate
from static_tokens.cli.commands.validate import validate

cli.add_command(generate)
cli.add_command(validate)


if __name__ == '__main__':
    cli()
