# static_tokens/storage/__init__.py
