from sqlalchemy import Column, Integer, String
from coursehub.db.base import Base # Импортируем базовый класс

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    # Slug считается из name при создании (см. crud.category) и совпадает с сегментом /catalog/<slug>
    slug = Column(String, index=True, unique=True, nullable=False)
    description = Column(String, nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}', slug='{self.slug}')>"
