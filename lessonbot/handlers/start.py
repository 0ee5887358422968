import logging

from aiogram import Router
from aiogram.types import Message

from lessonbot.config import Config
from lessonbot.db.database import chat_exists, create_chat
from lessonbot.keyboards.common import request_access_kb
from lessonbot.utils.events import EventKind, LessonEventFilter

logger = logging.getLogger(__name__)

router = Router()


def is_admin_username(username: str | None, config: Config) -> bool:
    return bool(username) and username in config.admin_usernames


@router.message(LessonEventFilter(EventKind.START))
async def cmd_start(message: Message, config: Config):
    chat_id = message.chat.id
    if await chat_exists(chat_id):
        return

    user = message.from_user
    username = user.username if user else None
    admin = is_admin_username(username, config)

    created = await create_chat(chat_id, user.id if user else None, username, admin)
    if not created:
        return
    logger.info("Registered chat %s (username=%s, admin=%s)", chat_id, username, admin)

    # admins already pass every access check
    if not admin:
        await message.answer("Please request access", reply_markup=request_access_kb())
