import logging

from aiogram import Bot
from aiogram.types import User

from lessonbot.db.database import get_admin_chat_ids

logger = logging.getLogger(__name__)


def display_name(user: User | None) -> str:
    if user is None:
        return "unknown"
    if user.username:
        return f"@{user.username}"
    return user.full_name


def allow_command(chat_id: int) -> str:
    return f"/allow_{chat_id}"


async def notify_admins(bot: Bot, requester_chat_id: int, requester: User | None) -> int:
    """
    Tells every admin chat about an access request, one send at a time in row
    order. The first failed send stops the loop and propagates.
    """
    admin_ids = await get_admin_chat_ids()
    text = f"{display_name(requester)} requested an access. {allow_command(requester_chat_id)}"

    for admin_id in admin_ids:
        await bot.send_message(chat_id=admin_id, text=text)

    logger.info("Access request from chat %s sent to %s admins", requester_chat_id, len(admin_ids))
    return len(admin_ids)
