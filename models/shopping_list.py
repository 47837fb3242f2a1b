"""
models/shopping_list.py
-----------------------
Domain types for per-conversation shopping lists.
"""

from dataclasses import dataclass
from typing import Union

# Telegram chat ids are integers; string ids are accepted for other transports.
ConversationId = Union[int, str]
ShoppingList = list[str]
Registry = dict[ConversationId, ShoppingList]


@dataclass
class ListResult:
    """
    Outcome of a shopping list operation.

    Attributes:
        text: Reply to send back to the conversation.
        changed: True if the registry was mutated and must be persisted.
    """
    text: str
    changed: bool = False
