import asyncio
import logging
import weakref

from aiogram import Bot

from lessonbot.db.database import (
    get_current_lesson,
    get_files_for_lesson,
    advance_lesson,
)

logger = logging.getLogger(__name__)

# one delivery at a time per chat, otherwise two quick "Next lesson" taps
# read the same cursor; an entry lives only while someone holds or awaits it
_chat_locks: weakref.WeakValueDictionary[int, asyncio.Lock] = weakref.WeakValueDictionary()


def chat_lock(chat_id: int) -> asyncio.Lock:
    lock = _chat_locks.get(chat_id)
    if lock is None:
        lock = asyncio.Lock()
        _chat_locks[chat_id] = lock
    return lock


def lesson_caption(lesson_number: int) -> str:
    return f"Lesson {lesson_number}"


async def send_lesson_file(
    bot: Bot,
    chat_id: int,
    file_id: str,
    mime_type: str,
    lesson_number: int,
) -> bool:
    """
    Sends one stored file, picking the method by MIME type.
    Returns False when the type is neither pdf nor audio (nothing is sent).
    """
    if "pdf" in mime_type:
        await bot.send_document(
            chat_id=chat_id,
            document=file_id,
            caption=lesson_caption(lesson_number),
            disable_notification=True,
        )
        return True

    if "audio" in mime_type:
        await bot.send_audio(
            chat_id=chat_id,
            audio=file_id,
            disable_notification=True,
        )
        return True

    logger.debug("Skipping file %s with unsupported MIME type %r", file_id, mime_type)
    return False


async def deliver_next_lesson(bot: Bot, chat_id: int) -> int | None:
    """
    Sends every file of the chat's current lesson in stored order, then moves
    the cursor forward by one.

    Returns the delivered lesson number, or None when the lesson has no files
    (the cursor stays where it is). A failed send propagates before the cursor
    is touched.
    """
    async with chat_lock(chat_id):
        lesson = await get_current_lesson(chat_id)
        if lesson is None:
            return None

        files = await get_files_for_lesson(lesson)
        if not files:
            return None

        for file_id, mime_type in files:
            await send_lesson_file(bot, chat_id, file_id, mime_type, lesson)

        await advance_lesson(chat_id)
        logger.info("Chat %s received lesson %s (%s files)", chat_id, lesson, len(files))
        return lesson
