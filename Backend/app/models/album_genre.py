from sqlalchemy import Table, Column, Integer, String, ForeignKey
from app.services.database import Base

# This is NOT a model class, it's a direct Table definition
album_genre = Table(
    'album_genre',
    Base.metadata,
    Column('album_id', String(64), ForeignKey('albums.id'), primary_key=True),
    Column('genre_id', Integer, ForeignKey('genres.id'), primary_key=True, index=True)
)
