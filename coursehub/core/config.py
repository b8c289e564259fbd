from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Класс для хранения настроек приложения."""
    DATABASE_URL: str = "sqlite:///./coursehub.db"
    # Единственный origin, которому разрешён CORS с cookie
    FRONTEND_URL: str = "http://localhost:3000"
    PORT: int = 4000
    # Базовый адрес API, к которому ходит навбар за категориями
    API_URL: str = "http://127.0.0.1:4000/api/v1"
    # 💡 Папка со сборкой фронтенда (index.html + assets)
    PUBLIC_DIR: str = "public"
    CATEGORY_FETCH_TIMEOUT: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        case_sensitive = True

settings = Settings()
