from sqlalchemy.orm import declarative_base

# Базовый класс для всех ORM-моделей
Base = declarative_base()
