import logging

from aiogram import Router, Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from lessonbot.db.database import check_access
from lessonbot.services.delivery import deliver_next_lesson
from lessonbot.utils.events import EventKind, LessonEventFilter

logger = logging.getLogger(__name__)

router = Router()


@router.message(LessonEventFilter(EventKind.NEXT_LESSON))
async def next_lesson(message: Message, bot: Bot):
    chat_id = message.chat.id
    if not await check_access(chat_id):
        return

    # UI cleanup only, must not block delivery
    try:
        await bot.delete_message(chat_id=chat_id, message_id=message.message_id)
    except TelegramAPIError as e:
        logger.warning("Could not delete message %s in chat %s: %s", message.message_id, chat_id, e)

    lesson = await deliver_next_lesson(bot, chat_id)
    if lesson is None:
        await message.answer("No more lessons available")
