from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

DEFAULT_DB_PATH = "lessonbot/db/bot.sqlite3"


@dataclass(frozen=True)
class Config:
    bot_token: str
    webhook: bool = False
    app_url: str = ""
    port: int = 8080
    admin_usernames: frozenset[str] = field(default_factory=frozenset)
    db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"

    @property
    def webhook_path(self) -> str:
        return f"/bot{self.bot_token}"

    @property
    def webhook_url(self) -> str:
        return f"{self.app_url.rstrip('/')}{self.webhook_path}"


def parse_admin_usernames(raw: str | None) -> frozenset[str]:
    # exact, case-sensitive usernames; empty entries are skipped
    return frozenset(p for p in (raw or "").split(",") if p)


def load_config() -> Config:
    load_dotenv()

    bot_token = os.getenv("BOT_TOKEN") or os.getenv("TELEGRAM_TOKEN")
    if not bot_token:
        raise RuntimeError("BOT_TOKEN is not defined (check .env).")

    webhook = bool(os.getenv("WEBHOOK"))
    app_url = os.getenv("APP_URL", "")
    if webhook and not app_url:
        raise RuntimeError("APP_URL is not defined (required when WEBHOOK is set).")

    port_raw = os.getenv("PORT", "8080")
    try:
        port = int(port_raw)
    except ValueError:
        raise RuntimeError(f"PORT must be an integer, got {port_raw!r}.") from None

    return Config(
        bot_token=bot_token,
        webhook=webhook,
        app_url=app_url,
        port=port,
        admin_usernames=parse_admin_usernames(os.getenv("ADMIN_USERNAMES")),
        db_path=os.getenv("DB_PATH", DEFAULT_DB_PATH),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
