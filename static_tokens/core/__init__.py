# static_tokens/core/__init__.py
