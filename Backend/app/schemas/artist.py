from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ArtistBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    image_url: Optional[str] = None

class ArtistCreate(ArtistBase):
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)

    model_config = ConfigDict(extra="forbid")

class ArtistResponse(ArtistBase):
    id: str

    model_config = ConfigDict(from_attributes=True)
