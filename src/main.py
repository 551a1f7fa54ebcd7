import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from aiogram import Bot, Dispatcher
from aiogram.types import BotCommand

from src.config import settings
from src.bot.handlers import router as bot_router
from src.database import engine
from src.routes.health import router as health_router
from src.routes.questions import router as questions_router
from src.services.catalog import get_catalog

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- AIOGRAM SETUP ---
dp = Dispatcher()
dp.include_router(bot_router)

async def set_bot_commands(bot_instance: Bot):
    commands = [
        BotCommand(command="start", description="Начать работу"),
        BotCommand(command="random", description="Случайный вопрос"),
        BotCommand(command="question", description="Вопрос по ID"),
        BotCommand(command="tag", description="Вопросы по тегу"),
        BotCommand(command="stats", description="Статистика банка"),
    ]
    await bot_instance.set_my_commands(commands)

# --- FASTAPI LIFESPAN ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Каталог собираем один раз на старте, битые данные валят запуск сразу
    logger.info("Startup: Loading question catalog...")
    get_catalog()

    bot = None
    polling_task = None
    if settings.BOT_TOKEN:
        logger.info("Startup: Setting up bot...")
        bot = Bot(token=settings.BOT_TOKEN)
        await set_bot_commands(bot)
        polling_task = asyncio.create_task(dp.start_polling(bot, handle_signals=False))
    else:
        logger.info("Startup: BOT_TOKEN is not set, bot disabled")

    yield

    if polling_task is not None:
        logger.info("Shutdown: Stopping bot...")
        polling_task.cancel()
        try:
            await polling_task
        except asyncio.exceptions.CancelledError:
            pass
        await bot.session.close()
    await engine.dispose()

# --- FASTAPI SETUP ---
app = FastAPI(title="DSA Interview Catalog API", version=settings.APP_VERSION, lifespan=lifespan)

# --- CORS CONFIGURATION ---
# Фронтенд ходит к нам с другого origin; если CORS_ORIGIN не задан, разрешаем всем
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN] if settings.CORS_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- ROUTERS ---
app.include_router(health_router)
app.include_router(questions_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.API_PORT)
