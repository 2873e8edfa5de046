from pydantic import BaseModel


class Photo(BaseModel):
    id: str
    url: str
    isMain: bool = False


class PhotoUploaded(BaseModel):
    success: bool = True
    photoId: str
    url: str


class MainPhotoRequest(BaseModel):
    photoId: str
