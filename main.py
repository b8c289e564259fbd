import uvicorn

from coursehub.core.config import settings
from coursehub.db.session import connect_db


def run():
    # 💡 Проверяем базу до старта сервера: при ошибке connect_db завершит процесс с кодом 1
    connect_db()
    uvicorn.run("coursehub.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    # Локальный запуск: python main.py
    run()
