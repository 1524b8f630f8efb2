# static_tokens/cli/__init__.py
