"""
tests/conftest.py - shared fixtures: on-disk repository, service, fake Telegram objects.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import Update

from handlers.list_handler import SERVICE_KEY
from repositories.list_repo import ShoppingListRepository
from security import rate_limiter
from services.list_service import ShoppingListService
from tests.fakes import MemoryRepository


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def list_path(tmp_path):
    return tmp_path / "shopping_list.json"


@pytest.fixture
def repository(list_path):
    return ShoppingListRepository(list_path)


@pytest.fixture
def memory_repo():
    return MemoryRepository()


@pytest.fixture
def service(memory_repo):
    return ShoppingListService(repository=memory_repo)


@pytest.fixture
def make_update():
    def _make(text: str, chat_id: int = 100):
        update = MagicMock(spec=Update)
        update.effective_chat = MagicMock(id=chat_id)
        update.effective_message = MagicMock()
        update.effective_message.text = text
        update.effective_message.reply_text = AsyncMock()
        return update
    return _make


@pytest.fixture
def context(service):
    ctx = MagicMock()
    ctx.bot_data = {SERVICE_KEY: service}
    return ctx
