"""
repositories/list_repo.py
--------------------------
Data access layer for shopping lists.
The whole registry is stored as a single JSON document that is
overwritten on every save.
"""

import json
import os
from pathlib import Path

from config import SHOPPING_LIST_PATH
from models.shopping_list import ConversationId, Registry
from utils.logger import get_logger

logger = get_logger(__name__)


# String ids that would read back as an int, or that already carry the
# marker, are stored with it so int and str ids never share a JSON key.
_STR_KEY_PREFIX = "str:"


def _is_int_key(key: str) -> bool:
    """True only for the canonical spelling str(int(key)), e.g. "-42" but not "+5" or "1_000"."""
    try:
        return str(int(key)) == key
    except ValueError:
        return False


def _format_key(chat_id: ConversationId) -> str:
    if isinstance(chat_id, int):
        return str(chat_id)
    if _is_int_key(chat_id) or chat_id.startswith(_STR_KEY_PREFIX):
        return _STR_KEY_PREFIX + chat_id
    return chat_id


def _parse_key(key: str) -> ConversationId:
    """JSON object keys are strings; restore numeric chat ids."""
    if key.startswith(_STR_KEY_PREFIX):
        return key[len(_STR_KEY_PREFIX):]
    if _is_int_key(key):
        return int(key)
    return key


class ShoppingListRepository:
    """Repository that loads and saves the shopping list registry."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or SHOPPING_LIST_PATH)

    def load(self) -> Registry:
        """
        Read the persisted registry.

        Returns:
            The stored registry, or an empty one if the document is
            missing, unreadable or malformed.
        """
        if not self.path.exists():
            logger.info(f"No shopping list file at {self.path}, starting empty.")
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Could not read shopping lists from {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object.")
            return {}

        registry: Registry = {}
        for key, items in data.items():
            if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                logger.warning(f"Ignoring {self.path}: list for chat {key} is malformed.")
                return {}
            registry[_parse_key(key)] = list(items)

        logger.info(f"Loaded shopping lists for {len(registry)} chat(s) from {self.path}.")
        return registry

    def save(self, registry: Registry) -> bool:
        """
        Overwrite the persisted document with the full registry.

        Failures are logged and swallowed.

        Returns:
            True if the document was written.
        """
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            payload = json.dumps(
                {_format_key(chat_id): items for chat_id, items in registry.items()},
                ensure_ascii=False,
                indent=2,
            )
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save shopping lists to {self.path}: {e}")
            return False
