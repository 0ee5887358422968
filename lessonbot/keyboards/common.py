from aiogram.types import (
    ReplyKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardRemove,
)

REQUEST_ACCESS_TEXT = "Request access"
NEXT_LESSON_TEXT = "Next lesson"


def request_access_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=REQUEST_ACCESS_TEXT)],
        ],
        resize_keyboard=True
    )


def next_lesson_kb() -> ReplyKeyboardMarkup:
    """
    Persistent keyboard for approved chats.
    """
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=NEXT_LESSON_TEXT)],
        ],
        resize_keyboard=True,
        one_time_keyboard=False
    )


def remove_kb() -> ReplyKeyboardRemove:
    return ReplyKeyboardRemove(remove_keyboard=True)
