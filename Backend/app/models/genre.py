from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.services.database import Base
from app.models.album_genre import album_genre

class Genre(Base):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)

    albums = relationship("Album", secondary=album_genre, back_populates="genres")
