import asyncio
from typing import List, Tuple

from loguru import logger

from db.gateway import DocumentGateway
from exceptions.exceptions import ErrorAuthorCreation, ErrorAuthorDelete, ErrorAuthorNotFound, ErrorAuthorUpdate
from models.author import Author, AuthorCandidate
from models.book import Book
from repositories.repository_authors import AuthorRepository
from repositories.repository_books import BookRepository


class AuthorService:
    def __init__(self, gateway: DocumentGateway):
        self.authors = AuthorRepository(gateway)
        self.books = BookRepository(gateway)

    async def read_all_authors(self) -> List[Author]:
        authors = await self.authors.read_all_authors()
        logger.info(f"Found {len(authors)} authors")
        return authors

    async def read_author_with_books(self, author_id: str) -> Tuple[Author | None, List[Book]]:
        return await asyncio.gather(
            self.authors.read_author_by_id(author_id),
            self.books.read_books_by_author(author_id),
        )

    async def read_author_detail(self, author_id: str) -> Tuple[Author, List[Book]]:
        author, books = await self.read_author_with_books(author_id)
        if author is None:
            logger.error(f"Author with id {author_id} not found")
            raise ErrorAuthorNotFound()
        logger.info(f"Author with id {author_id} found with {len(books)} books")
        return author, books

    async def read_author(self, author_id: str) -> Author:
        author = await self.authors.read_author_by_id(author_id)
        if author is None:
            logger.debug(f"id not found on update: {author_id}")
            raise ErrorAuthorNotFound()
        return author

    async def create_author(self, candidate: AuthorCandidate) -> Author:
        try:
            author = await self.authors.create_author(candidate)
        except Exception as e:
            msg = f"Failed create author with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorAuthorCreation(msg) from e
        logger.info(f"Author created with details: {author}")
        return author

    async def update_author(self, author_id: str, candidate: AuthorCandidate) -> Author:
        try:
            author = await self.authors.update_author_by_id(author_id, candidate)
        except Exception as e:
            msg = f"Failed update author with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorAuthorUpdate(msg) from e
        if author is None:
            logger.error(f"Author with id {author_id} vanished before update")
            raise ErrorAuthorNotFound()
        logger.info(f"Author successfully updated with details: {author}")
        return author

    async def delete_author(self, author_id: str) -> Tuple[Author | None, List[Book], bool]:
        """Removes the author unless books still reference it.

        Returns the author as found, its books and whether it was deleted.
        """
        author, books = await self.read_author_with_books(author_id)
        if author is None:
            logger.debug(f"Author with id {author_id} not found on delete")
            return None, books, False
        if books:
            logger.info(f"Author with id {author_id} has {len(books)} books, not deleted")
            return author, books, False
        try:
            await self.authors.delete_author_by_id(author_id)
        except Exception as e:
            msg = f"Failed delete author with id: {author_id} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorAuthorDelete(msg) from e
        logger.info(f"Author with id {author_id} successfully deleted")
        return author, books, True
