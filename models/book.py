from typing import List, Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    id: str
    title: str
    summary: str = ""
    isbn: str = ""
    author: Optional[str] = None
    genre: List[str] = Field(default_factory=list)

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"


class BookCandidate(BaseModel):
    id: Optional[str] = None
    title: str = ""
    summary: str = ""
    isbn: str = ""
    author: Optional[str] = None
    genre: List[str] = Field(default_factory=list)

    def to_document(self) -> dict:
        return self.model_dump(exclude={"id"})
