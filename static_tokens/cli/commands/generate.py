# static_tokens/cli/commands/generate.py

from pathlib import Path

import click
import msgspec

from static_tokens.pipeline.generator import StaticTokenGenerator
from static_tokens.types import StaticTokensError
from . import NETWORK_CHOICE, parse_networks


@click.command('generate')
@click.option('--network', 'networks', multiple=True, type=NETWORK_CHOICE,
              help='Network to generate (repeatable, default: devnet, testnet and mainnet)')
@click.option('--data-dir', type=click.Path(exists=True, file_okay=False), help='Token tables directory')
@click.option('--output-dir', type=click.Path(file_okay=False), help='Directory for the generated JSON files')
@click.option('--preserve-internal', is_flag=True,
              help='Keep the internal verification of CW20-derived factory tokens')
@click.pass_context
def generate(ctx, networks, data_dir, output_dir, preserve_internal):
    """Generate the static token list JSON files

    Examples:
        # All networks into ./tokens/staticTokens
        generate

        # Mainnet only, into a custom directory
        generate --network mainnet --output-dir build/tokens
    """
    config = ctx.obj['config']

    overrides = {}
    if data_dir:
        overrides['data_dir'] = Path(data_dir)
    if output_dir:
        overrides['output_dir'] = Path(output_dir)
    if preserve_internal:
        overrides['preserve_internal_verification'] = True
    if overrides:
        config = msgspec.structs.replace(config, **overrides)

    selected = parse_networks(networks) if networks else config.networks

    try:
        generator = StaticTokenGenerator.from_config(config)

        for network in selected:
            result = generator.generate(network)
            click.echo(f"✅ Generated static tokens for {network.value} ({result.token_count} tokens) -> {result.path}")

    except StaticTokensError as e:
        raise click.ClickException(str(e))
