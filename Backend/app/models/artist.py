import uuid
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.services.database import Base

class Artist(Base):
    __tablename__ = "artists"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    image_url = Column(String, nullable=True)

    # An artist can have many albums (one-to-many relationship)
    albums = relationship("Album", back_populates="artist")
