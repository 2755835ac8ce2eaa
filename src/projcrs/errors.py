# src/projcrs/errors.py
from __future__ import annotations

from typing import Optional


class DefinitionNotFound(LookupError):
    """
    No projection definition is registered for a code, even after URN shortening.

    `code` is the code as given; `key` is the last lookup key tried
    (the shortened form when shortening applied).
    """

    def __init__(self, code: str, key: Optional[str] = None) -> None:
        self.code = code
        self.key = key or code
        super().__init__(f"No projection definition for code {self.key}")
