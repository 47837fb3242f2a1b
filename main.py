"""
main.py
-------
Entry point for the ShopBot Telegram bot.

Responsibilities:
    - Load the persisted shopping lists into a single service instance.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import TELEGRAM_BOT_TOKEN
from handlers.list_handler import (
    SERVICE_KEY,
    add_command,
    error_handler,
    help_command,
    list_command,
    remove_command,
)
from services.list_service import ShoppingListService
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("help", "Display the supported commands"),
        BotCommand("add", "Add items to the shopping list"),
        BotCommand("remove", "Remove items by number, or all"),
        BotCommand("list", "List all items to be bought"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str, service: ShoppingListService) -> Application:
    """Build the Telegram application and inject the shopping list service."""
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .build()
    )
    app.bot_data[SERVICE_KEY] = service

    app.add_handler(CommandHandler(["help", "start"], help_command))
    app.add_handler(CommandHandler("add", add_command))
    app.add_handler(CommandHandler("remove", remove_command))
    app.add_handler(CommandHandler("list", list_command))
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set. Add it to the environment or .env file.")
        raise SystemExit(1)

    # ── 1. Shopping list state ────────────────────────────
    service = ShoppingListService()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN, service)

    # ── 3. Start polling ──────────────────────────────────
    logger.info("ShopBot is running! Press Ctrl+C to stop.")
    app.run_polling(allowed_updates=["message"])
    logger.info("ShopBot stopped.")


if __name__ == "__main__":
    main()
