import aiosqlite
from datetime import datetime

from lessonbot.config import DEFAULT_DB_PATH
from .models import SCHEMA_SQL

DB_PATH = DEFAULT_DB_PATH


async def init_db(path: str | None = None) -> None:
    global DB_PATH
    if path:
        DB_PATH = path

    async with aiosqlite.connect(DB_PATH) as db:
        await db.executescript(SCHEMA_SQL)
        await db.commit()


# --- chats ---

async def chat_exists(chat_id: int) -> bool:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute("SELECT 1 FROM chats WHERE id=?", (chat_id,))
        return await cur.fetchone() is not None


async def create_chat(
    chat_id: int,
    user_id: int | None,
    username: str | None,
    admin: bool,
) -> bool:
    """
    Inserts a chat row; an existing row is left untouched.
    Returns True when a row was actually inserted.
    """
    now = datetime.now().isoformat(timespec="seconds")
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute(
            """
            INSERT OR IGNORE INTO chats (id, user_id, username, admin, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (chat_id, user_id, username, int(admin), now),
        )
        await db.commit()
        return cur.rowcount == 1


async def get_chat(chat_id: int):
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute(
            """
            SELECT id, user_id, username, admin, allow_access, current_lesson
            FROM chats
            WHERE id=?
            """,
            (chat_id,),
        )
        return await cur.fetchone()


async def check_admin(chat_id: int) -> bool:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute("SELECT admin FROM chats WHERE id=?", (chat_id,))
        row = await cur.fetchone()
        return bool(row and row[0])


async def check_access(chat_id: int) -> bool:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute(
            "SELECT admin OR allow_access FROM chats WHERE id=?",
            (chat_id,),
        )
        row = await cur.fetchone()
        return bool(row and row[0])


async def get_admin_chat_ids() -> list[int]:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute("SELECT id FROM chats WHERE admin=1 ORDER BY rowid")
        rows = await cur.fetchall()
        return [int(r[0]) for r in rows]


async def allow_access(chat_id: int) -> str | None:
    """
    Sets allow_access=1 and reads the username back in the same transaction.
    None when the chat is unknown or has no username.
    """
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute("UPDATE chats SET allow_access=1 WHERE id=?", (chat_id,))
        cur = await db.execute("SELECT username FROM chats WHERE id=?", (chat_id,))
        row = await cur.fetchone()
        await db.commit()
        return row[0] if row and row[0] else None


async def get_current_lesson(chat_id: int) -> int | None:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute("SELECT current_lesson FROM chats WHERE id=?", (chat_id,))
        row = await cur.fetchone()
        return int(row[0]) if row else None


async def advance_lesson(chat_id: int) -> None:
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute(
            "UPDATE chats SET current_lesson = current_lesson + 1 WHERE id=?",
            (chat_id,),
        )
        await db.commit()


# --- lesson files ---

async def get_files_for_lesson(lesson_number: int) -> list[tuple[str, str]]:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute(
            """
            SELECT file_id, mime_type
            FROM lesson_files
            WHERE lesson_number=?
            ORDER BY id
            """,
            (lesson_number,),
        )
        rows = await cur.fetchall()
        return [(r[0], r[1]) for r in rows]


async def get_last_lesson_number() -> int | None:
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute("SELECT MAX(lesson_number) FROM lesson_files")
        row = await cur.fetchone()
        return int(row[0]) if row and row[0] is not None else None


async def add_lesson_file(lesson_number: int, file_id: str, mime_type: str) -> None:
    now = datetime.now().isoformat(timespec="seconds")
    async with aiosqlite.connect(DB_PATH) as db:
        await db.execute(
            """
            INSERT INTO lesson_files (lesson_number, file_id, mime_type, uploaded_at)
            VALUES (?, ?, ?, ?)
            """,
            (lesson_number, file_id, mime_type, now),
        )
        await db.commit()
