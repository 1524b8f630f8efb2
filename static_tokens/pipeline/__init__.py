# static_tokens/pipeline/__init__.py

from .generator import GeneratedList, StaticTokenGenerator

__all__ = ['GeneratedList', 'StaticTokenGenerator']
