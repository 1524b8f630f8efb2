# static_tokens/cli/commands/validate.py

from pathlib import Path

import click

from static_tokens.data.loader import load_token_sources
from static_tokens.pipeline.generator import StaticTokenGenerator
from static_tokens.storage.writer import StaticTokenWriter, find_duplicate_denoms
from static_tokens.transform.metadata import FactoryMetadataIndex
from static_tokens.types import StaticTokensError


@click.command('validate')
@click.option('--data-dir', type=click.Path(exists=True, file_okay=False), help='Token tables directory')
@click.pass_context
def validate(ctx, data_dir):
    """Load every token table and preview the generated lists without writing"""
    config = ctx.obj['config']
    data_path = Path(data_dir) if data_dir else config.data_dir

    try:
        sources = load_token_sources(data_path)
    except StaticTokensError as e:
        raise click.ClickException(str(e))

    click.echo("\n🔍 DRY RUN - Static Token Preview")
    click.echo("=" * 50)
    click.echo(f"Data directory: {data_path}")

    click.echo("\n📋 Source tables:")
    for table, count in sources.table_counts().items():
        click.echo(f"   {table:<22} {count:>5}")

    metadata_index = FactoryMetadataIndex(sources.factory_metadata)

    click.echo("\n🏭 CW20 factory registrations:")
    for network in config.networks:
        click.echo(f"   {network.value:<10} {len(metadata_index.entries(network)):>5}")

    generator = StaticTokenGenerator(
        sources=sources,
        writer=StaticTokenWriter(config.output_dir),
        get_metadata=metadata_index,
        preserve_internal_verification=config.preserve_internal_verification,
    )

    duplicate_count = 0
    click.echo("\n📊 Generated lists:")
    for network in config.networks:
        try:
            tokens = generator.build(network)
        except StaticTokensError as e:
            raise click.ClickException(str(e))

        click.echo(f"   {network.value:<10} {len(tokens):>5} tokens -> {generator.writer.path_for(network)}")

        for denom in find_duplicate_denoms(tokens):
            click.echo(f"   ⚠️  duplicate denom: {denom}")
            duplicate_count += 1

    if duplicate_count:
        click.echo(f"\n⚠️  {duplicate_count} duplicate denoms found (kept in output)")
    else:
        click.echo("\n✅ Ready to generate!")
