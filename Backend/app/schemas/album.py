from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Optional, List
from .artist import ArtistResponse
from .genre import GenreResponse
from .song import SongSummary

class AlbumBase(BaseModel):
    title: str = Field(min_length=1)
    release_date: date
    cover_url: Optional[str] = None

class AlbumCreate(AlbumBase):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    artist_id: str
    genre_ids: List[Annotated[int, Field(gt=0, le=2**31 - 1)]] = []

    model_config = ConfigDict(extra="forbid")

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, value):
        # Clients send either "1997-05-21" or a full timestamp such as "1997-05-21T00:00:00.000Z"
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        return value

class AlbumResponse(AlbumBase):
    id: str
    artist_id: str
    artist: ArtistResponse

    model_config = ConfigDict(from_attributes=True)

class AlbumDetailResponse(AlbumResponse):
    # These will automatically include the nested objects in the API response
    songs: List[SongSummary] = []
    genres: List[GenreResponse] = []
