import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

# --- ИМПОРТЫ РОУТЕРОВ ---
from coursehub.api.v1.endpoints import categories
# -------------------------

from coursehub.core.config import settings
from coursehub.db.base import Base
from coursehub.db.session import engine
from coursehub.models import category  # noqa: F401  регистрирует таблицу в Base.metadata

# --- Настройка Логирования ---
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"App is running at http://localhost:{settings.PORT}")
    yield


app = FastAPI(
    title="CourseHub Backend",
    version="1.0.0",
    lifespan=lifespan,
)

# Настройки CORS: только наш фронтенд, с cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роуты курсов и категорий
app.include_router(
    categories.router,
    prefix="/api/v1",
    tags=["Categories"]
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# 💡 Статика фронтенда + fallback на index.html для клиентского роутинга.
# Регистрируется последним, чтобы не перекрывать API.
@app.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    public_dir = os.path.abspath(settings.PUBLIC_DIR)

    if full_path:
        file_path = os.path.abspath(os.path.join(public_dir, full_path))
        # Не отдаём ничего за пределами PUBLIC_DIR (../ в пути)
        if file_path.startswith(public_dir + os.sep) and os.path.isfile(file_path):
            return FileResponse(file_path)

    index_path = os.path.join(public_dir, "index.html")
    if not os.path.isfile(index_path):
        logger.warning(f"Frontend не найден в {public_dir}. Соберите его перед деплоем!")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Frontend build not found")

    return FileResponse(index_path)
