from datetime import date
from typing import Optional

from pydantic import BaseModel


def format_date(value: Optional[date]) -> str:
    return value.strftime("%b %d, %Y") if value else ""


class Author(BaseModel):
    id: str
    first_name: str
    family_name: str
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    @property
    def name(self) -> str:
        return f"{self.family_name}, {self.first_name}"

    @property
    def url(self) -> str:
        return f"/catalog/author/{self.id}"

    @property
    def date_of_birth_formatted(self) -> str:
        return format_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return format_date(self.date_of_death)

    @property
    def lifespan(self) -> str:
        return f"{self.date_of_birth_formatted} - {self.date_of_death_formatted}"


class AuthorCandidate(BaseModel):
    """Form values of an author that may not pass validation yet."""

    id: Optional[str] = None
    first_name: str = ""
    family_name: str = ""
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    def to_document(self) -> dict:
        return self.model_dump(exclude={"id"})
