# static_tokens/types/configs/__init__.py
