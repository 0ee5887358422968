SCHEMA_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS chats (
    id INTEGER PRIMARY KEY,             -- Telegram chat id
    user_id INTEGER,
    username TEXT,                      -- display only, may be NULL
    admin INTEGER NOT NULL DEFAULT 0,
    allow_access INTEGER NOT NULL DEFAULT 0,
    current_lesson INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS lesson_files (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    lesson_number INTEGER NOT NULL,
    file_id TEXT NOT NULL,              -- Telegram file id, bytes are never stored
    mime_type TEXT NOT NULL,
    uploaded_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_lesson_files_number
ON lesson_files(lesson_number);
"""
