import re
from dataclasses import dataclass
from enum import Enum

from aiogram.filters import BaseFilter
from aiogram.types import Message

from lessonbot.keyboards.common import REQUEST_ACCESS_TEXT, NEXT_LESSON_TEXT

START_RE = re.compile(r"^/start(?:@\w+)?(?:\s|$)")
ALLOW_RE = re.compile(r"/allow_(\d+)")


class EventKind(str, Enum):
    UPLOAD = "upload"
    START = "start"
    REQUEST_ACCESS = "request_access"
    ALLOW = "allow"
    NEXT_LESSON = "next_lesson"


@dataclass(frozen=True)
class LessonEvent:
    kind: EventKind
    target_chat_id: int | None = None


def classify(message: Message) -> LessonEvent | None:
    """
    Maps an incoming message to exactly one event kind.

    Precedence: attachment, /start, access request, /allow_<id>, next lesson.
    Anything else gives None and the update is ignored.
    """
    if message.audio or message.document:
        return LessonEvent(EventKind.UPLOAD)

    text = message.text
    if not text:
        return None

    if START_RE.match(text):
        return LessonEvent(EventKind.START)
    if REQUEST_ACCESS_TEXT in text:
        return LessonEvent(EventKind.REQUEST_ACCESS)

    m = ALLOW_RE.search(text)
    if m:
        return LessonEvent(EventKind.ALLOW, target_chat_id=int(m.group(1)))

    if NEXT_LESSON_TEXT in text:
        return LessonEvent(EventKind.NEXT_LESSON)
    return None


class LessonEventFilter(BaseFilter):
    """
    Passes only messages of the given kind; ALLOW also injects `target_chat_id`.
    """

    def __init__(self, kind: EventKind):
        self.kind = kind

    async def __call__(self, message: Message) -> bool | dict:
        event = classify(message)
        if event is None or event.kind is not self.kind:
            return False
        if event.target_chat_id is not None:
            return {"target_chat_id": event.target_chat_id}
        return True
