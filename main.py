import asyncio
import logging

from aiohttp import web
from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramAPIError
from aiogram.webhook.aiohttp_server import SimpleRequestHandler, setup_application

from lessonbot.config import Config, load_config
from lessonbot.db.database import init_db

from lessonbot.handlers.admin import router as admin_router
from lessonbot.handlers.start import router as start_router
from lessonbot.handlers.access import router as access_router
from lessonbot.handlers.lessons import router as lessons_router
from lessonbot.handlers.errors import on_error

logger = logging.getLogger("lessonbot")


def build_dispatcher(cfg: Config) -> Dispatcher:
    # config is handed to handlers as the `config` argument
    dp = Dispatcher(config=cfg)

    # admin routes are checked first
    dp.include_router(admin_router)

    dp.include_router(start_router)
    dp.include_router(access_router)
    dp.include_router(lessons_router)

    dp.errors.register(on_error)
    return dp


async def on_webhook_startup(bot: Bot, config: Config):
    await init_db(config.db_path)
    try:
        await bot.set_webhook(config.webhook_url)
        logger.info("Webhook is set up")
    except TelegramAPIError:
        logger.exception("Could not set webhook")


def run_webhook(cfg: Config) -> None:
    bot = Bot(token=cfg.bot_token)
    dp = build_dispatcher(cfg)
    dp.startup.register(on_webhook_startup)

    app = web.Application()
    SimpleRequestHandler(dispatcher=dp, bot=bot).register(app, path=cfg.webhook_path)
    setup_application(app, dp, bot=bot)

    web.run_app(app, host="0.0.0.0", port=cfg.port)


async def run_polling(cfg: Config) -> None:
    await init_db(cfg.db_path)

    bot = Bot(token=cfg.bot_token)
    dp = build_dispatcher(cfg)

    await bot.delete_webhook()
    logger.info("Bot started (polling)")
    await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())


def main():
    cfg = load_config()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if cfg.webhook:
        run_webhook(cfg)
    else:
        asyncio.run(run_polling(cfg))


if __name__ == "__main__":
    main()
