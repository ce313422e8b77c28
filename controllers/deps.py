from fastapi import Depends, Request

from db.gateway import DocumentGateway
from services.service_authors import AuthorService
from services.service_books import BookService
from services.service_genres import GenreService


def get_gateway(request: Request) -> DocumentGateway:
    return request.app.state.gateway


def get_author_service(gateway: DocumentGateway = Depends(get_gateway)) -> AuthorService:
    return AuthorService(gateway)


def get_genre_service(gateway: DocumentGateway = Depends(get_gateway)) -> GenreService:
    return GenreService(gateway)


def get_book_service(gateway: DocumentGateway = Depends(get_gateway)) -> BookService:
    return BookService(gateway)
