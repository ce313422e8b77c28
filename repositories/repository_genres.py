from typing import List

from db.gateway import ASCENDING, DocumentGateway
from models.genre import Genre, GenreCandidate

COLLECTION = "genres"


class GenreRepository:
    def __init__(self, gateway: DocumentGateway):
        self.gateway = gateway

    async def create_genre(self, genre: GenreCandidate) -> Genre:
        return Genre(**await self.gateway.save(COLLECTION, genre.to_document()))

    async def read_genre_by_id(self, genre_id: str) -> Genre | None:
        document = await self.gateway.find_by_id(COLLECTION, genre_id)
        return Genre(**document) if document else None

    async def read_genre_by_name(self, name: str) -> Genre | None:
        document = await self.gateway.find_one(COLLECTION, {"name": name})
        return Genre(**document) if document else None

    async def read_all_genres(self) -> List[Genre]:
        documents = await self.gateway.find_all(COLLECTION, sort=[("name", ASCENDING)])
        return [Genre(**document) for document in documents]

    async def count_genres(self) -> int:
        return await self.gateway.count(COLLECTION)

    async def update_genre_by_id(self, genre_id: str, genre: GenreCandidate) -> Genre | None:
        document = await self.gateway.update_by_id(COLLECTION, genre_id, genre.to_document())
        return Genre(**document) if document else None

    async def delete_genre_by_id(self, genre_id: str) -> bool:
        return await self.gateway.remove_by_id(COLLECTION, genre_id) is not None
