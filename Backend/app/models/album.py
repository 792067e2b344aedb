import uuid
from sqlalchemy import Column, Date, String, ForeignKey
from sqlalchemy.orm import relationship

from app.services.database import Base
from app.models.album_genre import album_genre

class Album(Base):
    __tablename__ = "albums"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False, index=True)
    release_date = Column(Date, nullable=False)
    cover_url = Column(String, nullable=True)

    # An album is owned by exactly one artist
    artist_id = Column(String(64), ForeignKey("artists.id"), nullable=False, index=True)
    artist = relationship("Artist", back_populates="albums")

    # An album has many songs
    songs = relationship("Song", back_populates="album")

    # An album can belong to many genres (many-to-many relationship)
    genres = relationship("Genre", secondary=album_genre, back_populates="albums")
