from typing import List

from db.gateway import ASCENDING, DocumentGateway
from models.book import Book, BookCandidate

COLLECTION = "books"
SUMMARY_FIELDS = ["title", "summary"]


class BookRepository:
    def __init__(self, gateway: DocumentGateway):
        self.gateway = gateway

    async def create_book(self, book: BookCandidate) -> Book:
        return Book(**await self.gateway.save(COLLECTION, book.to_document()))

    async def read_book_by_id(self, book_id: str) -> Book | None:
        document = await self.gateway.find_by_id(COLLECTION, book_id)
        return Book(**document) if document else None

    async def read_all_books(self) -> List[Book]:
        documents = await self.gateway.find_all(COLLECTION, sort=[("title", ASCENDING)])
        return [Book(**document) for document in documents]

    async def read_books_by_author(self, author_id: str) -> List[Book]:
        documents = await self.gateway.find_all(COLLECTION, {"author": author_id}, SUMMARY_FIELDS)
        return [Book(**document) for document in documents]

    async def read_books_by_genre(self, genre_id: str) -> List[Book]:
        documents = await self.gateway.find_all(COLLECTION, {"genre": genre_id}, SUMMARY_FIELDS)
        return [Book(**document) for document in documents]

    async def count_books(self) -> int:
        return await self.gateway.count(COLLECTION)

    async def update_book_by_id(self, book_id: str, book: BookCandidate) -> Book | None:
        document = await self.gateway.update_by_id(COLLECTION, book_id, book.to_document())
        return Book(**document) if document else None

    async def delete_book_by_id(self, book_id: str) -> bool:
        return await self.gateway.remove_by_id(COLLECTION, book_id) is not None
