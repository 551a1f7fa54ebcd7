import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase
from src.config import settings

logger = logging.getLogger(__name__)

# Создаем движок (Engine). Подключение ленивое: до первого запроса в БД не ходим
engine = create_async_engine(
    settings.database_url,
    echo=False,  # Ставь True, если хочешь видеть SQL запросы в консоли
    pool_pre_ping=True,
)

# Фабрика сессий
# expire_on_commit=False обязателен для асинхронной работы
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Базовый класс для всех моделей
class Base(DeclarativeBase):
    pass

async def check_database_health() -> bool:
    """Пингует БД через SELECT 1. Ошибку не пробрасывает, а возвращает False."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database health check failed: {e}")
        return False
