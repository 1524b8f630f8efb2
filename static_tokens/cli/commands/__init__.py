# static_tokens/cli/commands/__init__.py

import click

from static_tokens.types import Network


NETWORK_CHOICE = click.Choice([network.value for network in Network])


def parse_networks(values):
    return tuple(Network(value) for value in values)
