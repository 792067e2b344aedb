import uuid
from sqlalchemy import Boolean, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.services.database import Base

class Song(Base):
    __tablename__ = "songs"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False, index=True)
    is_favorite = Column(Boolean, default=False, nullable=False, index=True)
    duration = Column(Integer, nullable=True)  # seconds
    audio_url = Column(String, nullable=True)

    # Link to its parent album
    album_id = Column(String(64), ForeignKey("albums.id"), nullable=True, index=True)
    album = relationship("Album", back_populates="songs")
