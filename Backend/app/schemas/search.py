from pydantic import BaseModel
from typing import List
from .artist import ArtistResponse
from .album import AlbumResponse
from .song import SongResponse

class SearchResponse(BaseModel):
    artists: List[ArtistResponse] = []
    albums: List[AlbumResponse] = []
    songs: List[SongResponse] = []
