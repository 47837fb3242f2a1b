"""
handlers/list_handler.py
-------------------------
Handles the shopping list commands.
Delegates all logic to the ShoppingListService stored in bot_data.
"""

from telegram import Update
from telegram.constants import MessageLimit
from telegram.ext import ContextTypes

from security.rate_limiter import rate_limited
from services.list_service import ShoppingListService
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_KEY = "list_service"

HELP_TEXT = (
    "These commands are supported:\n"
    "/help - Display this text.\n"
    "/add - Add items to the shopping list: /add milk, eggs, bread\n"
    "/remove - Remove items after they're bought: /remove <item number> ... or /remove all\n"
    "/list - List all items to be bought"
)


def _service(context: ContextTypes.DEFAULT_TYPE) -> ShoppingListService:
    return context.bot_data[SERVICE_KEY]


def _chunks(text: str, limit: int = MessageLimit.MAX_TEXT_LENGTH) -> list[str]:
    """Split text into pieces Telegram accepts, breaking at line boundaries where possible."""
    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


async def _reply(update: Update, text: str) -> None:
    for chunk in _chunks(text):
        await update.effective_message.reply_text(chunk)


def _argument(update: Update) -> str:
    """Return the raw text after the command word ("/add@bot milk" -> "milk")."""
    text = update.effective_message.text or ""
    parts = text.split(maxsplit=1)
    return parts[1] if len(parts) > 1 else ""


@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help and /start - list the supported commands."""
    await update.effective_message.reply_text(HELP_TEXT)


@rate_limited
async def add_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /add <items> - add comma-separated items.
    Usage: /add milk, eggs
    """
    result = _service(context).add(update.effective_chat.id, _argument(update))
    await _reply(update, result.text)


@rate_limited
async def remove_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /remove <numbers|all> - remove items by their list number.
    Usage: /remove 0 2  or  /remove all
    """
    result = _service(context).remove(update.effective_chat.id, _argument(update))
    await _reply(update, result.text)


@rate_limited
async def list_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /list - show the numbered shopping list."""
    result = _service(context).list_items(update.effective_chat.id)
    await _reply(update, result.text)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers and tell the user something went wrong."""
    logger.error(f"Unhandled error while processing an update: {context.error}", exc_info=context.error)
    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text("Something went wrong, please try again.")
