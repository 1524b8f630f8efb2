# static_tokens/__main__.py

from static_tokens.cli.__main__ import cli


if __name__ == '__main__':
    cli()
