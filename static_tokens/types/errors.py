# static_tokens/types/errors.py

from pathlib import Path
from typing import Optional


class StaticTokensError(Exception):
    """Base class for every error raised by the generator."""


class SourceDataError(StaticTokensError):
    def __init__(self, message: str, path: Optional[Path] = None, table: Optional[str] = None):
        self.path = path
        self.table = table

        location = []
        if path is not None:
            location.append(str(path))
        if table:
            location.append(f"table '{table}'")

        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class OutputWriteError(StaticTokensError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
