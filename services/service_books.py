import asyncio
from typing import List, Tuple

from loguru import logger

from db.gateway import DocumentGateway
from exceptions.exceptions import ErrorBookCreation, ErrorBookDelete, ErrorBookNotFound, ErrorBookUpdate
from models.author import Author
from models.book import Book, BookCandidate
from models.genre import Genre
from repositories.repository_authors import AuthorRepository
from repositories.repository_books import BookRepository
from repositories.repository_genres import GenreRepository


class BookService:
    def __init__(self, gateway: DocumentGateway):
        self.books = BookRepository(gateway)
        self.authors = AuthorRepository(gateway)
        self.genres = GenreRepository(gateway)

    async def read_all_books(self) -> List[Book]:
        books = await self.books.read_all_books()
        logger.info(f"Found {len(books)} books")
        return books

    async def read_book(self, book_id: str) -> Book:
        book = await self.books.read_book_by_id(book_id)
        if book is None:
            logger.error(f"Book with id {book_id} not found")
            raise ErrorBookNotFound()
        logger.info(f"Book with id {book_id} found")
        return book

    async def read_book_detail(self, book_id: str) -> Tuple[Book, Author | None, List[Genre]]:
        book = await self.read_book(book_id)
        author, genres = await asyncio.gather(
            self.authors.read_author_by_id(book.author) if book.author else _nothing(),
            asyncio.gather(*(self.genres.read_genre_by_id(genre_id) for genre_id in book.genre)),
        )
        return book, author, [genre for genre in genres if genre is not None]

    async def read_form_choices(self) -> Tuple[List[Author], List[Genre]]:
        return await asyncio.gather(self.authors.read_all_authors(), self.genres.read_all_genres())

    async def count_catalog(self) -> dict:
        books, authors, genres = await asyncio.gather(
            self.books.count_books(),
            self.authors.count_authors(),
            self.genres.count_genres(),
        )
        return {"book_count": books, "author_count": authors, "genre_count": genres}

    async def create_book(self, candidate: BookCandidate) -> Book:
        try:
            book = await self.books.create_book(candidate)
        except Exception as e:
            msg = f"Failed create book with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookCreation(msg) from e
        logger.info(f"Book created with details: {book}")
        return book

    async def update_book(self, book_id: str, candidate: BookCandidate) -> Book:
        try:
            book = await self.books.update_book_by_id(book_id, candidate)
        except Exception as e:
            msg = f"Failed update book with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookUpdate(msg) from e
        if book is None:
            logger.error(f"Book with id {book_id} vanished before update")
            raise ErrorBookNotFound()
        logger.info(f"Book successfully updated with details: {book}")
        return book

    async def delete_book(self, book_id: str) -> bool:
        try:
            deleted = await self.books.delete_book_by_id(book_id)
        except Exception as e:
            msg = f"Failed delete book with id: {book_id} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorBookDelete(msg) from e
        if deleted:
            logger.info(f"Book with id {book_id} successfully deleted")
        else:
            logger.debug(f"Book with id {book_id} not found on delete")
        return deleted


async def _nothing():
    return None
