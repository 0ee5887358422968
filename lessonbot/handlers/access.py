from aiogram import Router, Bot
from aiogram.types import Message

from lessonbot.keyboards.common import remove_kb
from lessonbot.services.access import notify_admins
from lessonbot.utils.events import EventKind, LessonEventFilter

router = Router()


@router.message(LessonEventFilter(EventKind.REQUEST_ACCESS))
async def request_access(message: Message, bot: Bot):
    await notify_admins(bot, message.chat.id, message.from_user)
    await message.answer(
        "The request has been sent. Please wait for approval",
        reply_markup=remove_kb(),
    )
