from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from .artist import ArtistResponse

# A minimal album schema (with its artist) so songs can nest their album
# without importing album.py, which itself nests songs.
class AlbumInfo(BaseModel):
    id: str
    title: str
    release_date: date
    cover_url: Optional[str] = None
    artist_id: str
    artist: ArtistResponse

    model_config = ConfigDict(from_attributes=True)

class SongBase(BaseModel):
    title: str = Field(min_length=1)
    is_favorite: bool = False
    duration: Optional[int] = Field(default=None, ge=0)
    audio_url: Optional[str] = None

class SongCreate(SongBase):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    album_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

class SongSummary(SongBase):
    id: str
    album_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class SongResponse(SongSummary):
    album: Optional[AlbumInfo] = None

class FavoriteUpdate(BaseModel):
    favorite: bool
