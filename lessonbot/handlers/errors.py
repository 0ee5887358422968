import logging

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import ErrorEvent

logger = logging.getLogger(__name__)

FAILURE_TEXT = "Something went wrong"


async def on_error(event: ErrorEvent, bot: Bot) -> bool:
    """
    Dispatcher-level boundary: log the failure and tell the user, never re-raise.
    """
    logger.error("Handler failed: %s", event.exception, exc_info=event.exception)

    message = event.update.message
    if message is None:
        return True

    try:
        await bot.send_message(chat_id=message.chat.id, text=FAILURE_TEXT)
    except TelegramAPIError as e:
        logger.warning("Could not notify chat %s about the failure: %s", message.chat.id, e)
    return True
