import sys
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from coursehub.core.config import settings

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Условная инициализация Engine
# -------------------------------------------------------------------

if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite для локальной разработки: соединение используется из разных потоков Uvicorn
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
else:
    # PostgreSQL и другие удаленные БД
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def connect_db(bind=None) -> None:
    """
    Проверяет соединение с БД при старте.
    Если база недоступна, дальше работать смысла нет: пишем в лог и завершаем процесс с кодом 1.
    """
    bind = bind or engine
    logger.info(f"Database URL: {bind.url.render_as_string(hide_password=True)}")
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connection error: {e}")
        logger.error("Connection Issues with Database")
        sys.exit(1)
    logger.info("Database Connection established")
