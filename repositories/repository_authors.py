from typing import List

from db.gateway import ASCENDING, DocumentGateway
from models.author import Author, AuthorCandidate

COLLECTION = "authors"


class AuthorRepository:
    def __init__(self, gateway: DocumentGateway):
        self.gateway = gateway

    async def create_author(self, author: AuthorCandidate) -> Author:
        return Author(**await self.gateway.save(COLLECTION, author.to_document()))

    async def read_author_by_id(self, author_id: str) -> Author | None:
        document = await self.gateway.find_by_id(COLLECTION, author_id)
        return Author(**document) if document else None

    async def read_all_authors(self) -> List[Author]:
        documents = await self.gateway.find_all(COLLECTION, sort=[("family_name", ASCENDING)])
        return [Author(**document) for document in documents]

    async def count_authors(self) -> int:
        return await self.gateway.count(COLLECTION)

    async def update_author_by_id(self, author_id: str, author: AuthorCandidate) -> Author | None:
        document = await self.gateway.update_by_id(COLLECTION, author_id, author.to_document())
        return Author(**document) if document else None

    async def delete_author_by_id(self, author_id: str) -> bool:
        return await self.gateway.remove_by_id(COLLECTION, author_id) is not None
