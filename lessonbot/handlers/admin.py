import logging
import re

from aiogram import Router, Bot
from aiogram.types import Message

from lessonbot.db.database import (
    check_admin,
    allow_access,
    add_lesson_file,
    get_last_lesson_number,
)
from lessonbot.keyboards.common import next_lesson_kb
from lessonbot.utils.events import EventKind, LessonEventFilter

logger = logging.getLogger(__name__)

router = Router()

LESSON_NUMBER_RE = re.compile(r"^\s*(\d+)")


@router.message(LessonEventFilter(EventKind.ALLOW))
async def allow_cmd(message: Message, bot: Bot, target_chat_id: int):
    # silently ignored for non-admins
    if not await check_admin(message.chat.id):
        return

    username = await allow_access(target_chat_id)
    if not username:
        return

    logger.info("Chat %s approved by admin chat %s", target_chat_id, message.chat.id)
    await message.answer(f"@{username} allowed")
    await bot.send_message(
        chat_id=target_chat_id,
        text="You are allowed to use bot",
        reply_markup=next_lesson_kb(),
    )


async def resolve_lesson_number(caption: str | None) -> int:
    """
    Caption "3" or "3 intro" puts the file into lesson 3. Without a number the
    file joins the latest lesson, or lesson 1 when nothing is uploaded yet.
    """
    m = LESSON_NUMBER_RE.match(caption or "")
    if m:
        return int(m.group(1))
    last = await get_last_lesson_number()
    return last if last is not None else 1


@router.message(LessonEventFilter(EventKind.UPLOAD))
async def upload_lesson_file(message: Message):
    if not await check_admin(message.chat.id):
        return

    attachment = message.audio or message.document
    try:
        lesson_number = await resolve_lesson_number(message.caption)
        await add_lesson_file(lesson_number, attachment.file_id, attachment.mime_type or "")
    except Exception:
        logger.exception("Upload failed for chat %s", message.chat.id)
        await message.answer("Something went wrong")
        return

    # a failed reply goes to the error handler, the row stays stored
    await message.answer(f"Uploaded (lesson {lesson_number})")
