"""
security/rate_limiter.py
-------------------------
Rate limiting middleware to prevent command flooding.
Limits the number of commands a chat can send within a time window.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from utils.logger import get_logger

logger = get_logger(__name__)

# In-memory storage for rate tracking: {chat_id: [timestamp1, timestamp2, ...]}
_chat_timestamps: dict[int, list[float]] = defaultdict(list)


def _cleanup(chat_id: int) -> None:
    """Remove expired timestamps for a chat."""
    cutoff = time.time() - RATE_LIMIT_WINDOW_SECONDS
    _chat_timestamps[chat_id] = [
        t for t in _chat_timestamps[chat_id] if t > cutoff
    ]


def reset() -> None:
    """Forget all tracked timestamps."""
    _chat_timestamps.clear()


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per chat.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max commands per window (default: 30, 0 disables).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        chat = update.effective_chat
        if not chat:
            return

        if RATE_LIMIT_MESSAGES <= 0:
            return await func(update, context, *args, **kwargs)

        _cleanup(chat.id)

        if len(_chat_timestamps[chat.id]) >= RATE_LIMIT_MESSAGES:
            logger.warning(f"Rate limit hit for chat {chat.id}")
            await update.effective_message.reply_text(
                "You are sending commands too fast. Wait a moment and try again."
            )
            return

        _chat_timestamps[chat.id].append(time.time())
        return await func(update, context, *args, **kwargs)

    return wrapper
