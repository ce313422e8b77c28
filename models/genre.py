from typing import Optional

from pydantic import BaseModel


class Genre(BaseModel):
    id: str
    name: str

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"


class GenreCandidate(BaseModel):
    id: Optional[str] = None
    name: str = ""

    def to_document(self) -> dict:
        return self.model_dump(exclude={"id"})
