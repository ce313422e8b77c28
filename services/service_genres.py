import asyncio
from typing import List, Tuple

from loguru import logger

from db.gateway import DocumentGateway
from exceptions.exceptions import ErrorGenreCreation, ErrorGenreDelete, ErrorGenreNotFound, ErrorGenreUpdate
from models.book import Book
from models.genre import Genre, GenreCandidate
from repositories.repository_books import BookRepository
from repositories.repository_genres import GenreRepository


class GenreService:
    def __init__(self, gateway: DocumentGateway):
        self.genres = GenreRepository(gateway)
        self.books = BookRepository(gateway)

    async def read_all_genres(self) -> List[Genre]:
        genres = await self.genres.read_all_genres()
        logger.info(f"Found {len(genres)} genres")
        return genres

    async def read_genre_with_books(self, genre_id: str) -> Tuple[Genre | None, List[Book]]:
        return await asyncio.gather(
            self.genres.read_genre_by_id(genre_id),
            self.books.read_books_by_genre(genre_id),
        )

    async def read_genre_detail(self, genre_id: str) -> Tuple[Genre, List[Book]]:
        genre, books = await self.read_genre_with_books(genre_id)
        if genre is None:
            logger.error(f"Genre with id {genre_id} not found")
            raise ErrorGenreNotFound()
        logger.info(f"Genre with id {genre_id} found with {len(books)} books")
        return genre, books

    async def read_genre(self, genre_id: str) -> Genre:
        genre = await self.genres.read_genre_by_id(genre_id)
        if genre is None:
            logger.debug(f"id not found on update: {genre_id}")
            raise ErrorGenreNotFound()
        return genre

    async def create_genre(self, candidate: GenreCandidate) -> Tuple[Genre, bool]:
        """Returns the genre and whether it was newly created.

        A genre with exactly the same name is reused instead of duplicated.
        """
        existing = await self.genres.read_genre_by_name(candidate.name)
        if existing is not None:
            logger.info(f"Genre {candidate.name!r} already exists with id {existing.id}")
            return existing, False
        try:
            genre = await self.genres.create_genre(candidate)
        except Exception as e:
            msg = f"Failed create genre with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorGenreCreation(msg) from e
        logger.info(f"Genre created with details: {genre}")
        return genre, True

    async def update_genre(self, genre_id: str, candidate: GenreCandidate) -> Genre:
        try:
            genre = await self.genres.update_genre_by_id(genre_id, candidate)
        except Exception as e:
            msg = f"Failed update genre with details: {candidate} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorGenreUpdate(msg) from e
        if genre is None:
            logger.error(f"Genre with id {genre_id} vanished before update")
            raise ErrorGenreNotFound()
        logger.info(f"Genre successfully updated with details: {genre}")
        return genre

    async def delete_genre(self, genre_id: str) -> Tuple[Genre | None, List[Book], bool]:
        genre, books = await self.read_genre_with_books(genre_id)
        if genre is None:
            logger.debug(f"Genre with id {genre_id} not found on delete")
            return None, books, False
        if books:
            logger.info(f"Genre with id {genre_id} is used by {len(books)} books, not deleted")
            return genre, books, False
        try:
            await self.genres.delete_genre_by_id(genre_id)
        except Exception as e:
            msg = f"Failed delete genre with id: {genre_id} ---> Error: {str(e)}"
            logger.error(msg)
            raise ErrorGenreDelete(msg) from e
        logger.info(f"Genre with id {genre_id} successfully deleted")
        return genre, books, True
