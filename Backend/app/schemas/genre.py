from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class GenreBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)

class GenreCreate(GenreBase):
    id: Optional[int] = Field(default=None, gt=0, le=2**31 - 1)

    model_config = ConfigDict(extra="forbid")

class GenreResponse(GenreBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
