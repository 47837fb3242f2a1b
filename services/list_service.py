"""
services/list_service.py
-------------------------
Business logic for per-conversation shopping lists.

The service owns the in-memory registry. Every operation runs under a
single lock, from parsing the input to saving the snapshot, so commands
from concurrent chats cannot interleave.
"""

import copy
import threading
from typing import Optional

from models.shopping_list import ConversationId, ListResult, Registry
from repositories.list_repo import ShoppingListRepository
from utils.logger import get_logger

logger = get_logger(__name__)

NOT_SUBSCRIBED = "Not subscribed to anything... Add an item first with /add."
NOTHING_TO_SHOW = "Nothing to show yet. Add items with /add <item>, <item>."
EMPTY_LIST = "The shopping list is empty."
REMOVED_ALL = "Removed all items from the shopping list."
ADD_USAGE = "Usage: /add <item>[, <item> ...]"
REMOVE_USAGE = "Usage: /remove <item number> [<item number> ...] or /remove all"


class ShoppingListService:
    """Manages the shopping list of every conversation."""

    def __init__(
        self,
        repository: Optional[ShoppingListRepository] = None,
        registry: Optional[Registry] = None,
    ):
        self.repository = repository or ShoppingListRepository()
        self._lists: Registry = registry if registry is not None else self.repository.load()
        self._lock = threading.Lock()

    # ── Queries ─────────────────────────────────────────

    def exists(self, chat_id: ConversationId) -> bool:
        """Return True if the conversation has a list, even an empty one."""
        with self._lock:
            return chat_id in self._lists

    def snapshot(self) -> Registry:
        """Return a deep copy of the whole registry."""
        with self._lock:
            return copy.deepcopy(self._lists)

    def list_items(self, chat_id: ConversationId) -> ListResult:
        """Format the conversation's list as one "<index> - <item>" line per item."""
        with self._lock:
            items = self._lists.get(chat_id)
            if items is None:
                return ListResult(NOTHING_TO_SHOW)
            if not items:
                return ListResult(EMPTY_LIST)
            return ListResult("\n".join(f"{i} - {item}" for i, item in enumerate(items)))

    # ── Mutations ───────────────────────────────────────

    def add(self, chat_id: ConversationId, raw: str) -> ListResult:
        """
        Add comma-separated items to the conversation's list.

        Surrounding whitespace is trimmed and empty pieces are ignored.
        Items already on the list (exact match) are reported, not duplicated.
        """
        names = [piece.strip() for piece in raw.split(",")]
        names = [name for name in names if name]

        with self._lock:
            if not names:
                return ListResult(ADD_USAGE)

            items = self._lists.setdefault(chat_id, [])
            lines = []
            changed = False
            for name in names:
                if name in items:
                    lines.append(f"You already have {name} on the list.")
                    continue
                items.append(name)
                changed = True
                lines.append(f"Successfully added {name} to the shopping list.")
                logger.info(f"Chat {chat_id}: added '{name}'")

            return self._commit(ListResult("\n".join(lines), changed))

    def remove(self, chat_id: ConversationId, raw: str) -> ListResult:
        """
        Remove items by their current index, or every item with "all".

        Indices are applied one after another against the live list, so
        "0 0" removes the first two items. Tokens that are not
        non-negative integers and indices past the end of the list are
        reported and skipped.
        """
        argument = raw.strip()

        with self._lock:
            if argument == "all":
                items = self._lists.get(chat_id)
                if not items:
                    return ListResult(REMOVED_ALL)
                items.clear()
                logger.info(f"Chat {chat_id}: cleared the shopping list")
                return self._commit(ListResult(REMOVED_ALL, changed=True))

            items = self._lists.get(chat_id)
            if items is None:
                return ListResult(NOT_SUBSCRIBED)
            if not argument:
                return ListResult(REMOVE_USAGE)

            lines = []
            changed = False
            for token in argument.split():
                if not token.isdecimal():
                    lines.append(f"'{token}' is not a valid item number, skipped.")
                    continue
                index = int(token)
                if index >= len(items):
                    lines.append(f"There is no item number {index} on the list, skipped.")
                    continue
                name = items.pop(index)
                changed = True
                lines.append(f"Successfully removed {name} from the list.")
                logger.info(f"Chat {chat_id}: removed '{name}' (index {index})")

            return self._commit(ListResult("\n".join(lines), changed))

    def _commit(self, result: ListResult) -> ListResult:
        """Persist the registry after a mutation. Caller must hold the lock."""
        if result.changed:
            self.repository.save(self._lists)
        return result
