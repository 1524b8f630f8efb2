# static_tokens/data/__init__.py

from .loader import TokenSources, load_token_sources

__all__ = ['TokenSources', 'load_token_sources']
