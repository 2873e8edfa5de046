from pydantic import BaseModel

from arclead.models.filmography import Filmography


class NewArtist(BaseModel):
    name: str
    filmography: Filmography | None = None


class ArtistCreated(BaseModel):
    success: bool = True
    artistId: str


class Success(BaseModel):
    success: bool = True
