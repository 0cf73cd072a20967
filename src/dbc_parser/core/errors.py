from __future__ import annotations

from .models import Dbc


class InvalidDbcError(Exception):
    """В тексте не найдено ни одного сообщения BO_"""

    def __init__(self, dbc: Dbc, text: str) -> None:
        self.dbc = dbc
        self.text = text
        super().__init__(f"No messages found in DBC input ({len(text)} chars)")
