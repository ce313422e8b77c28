from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from controllers.deps import get_book_service
from controllers.rendering import redirect, render
from forms.book_form import validate_book_form
from models.book import BookCandidate
from services.service_books import BookService

BOOK_LIST_URL = "/catalog/books"

router = APIRouter(
    prefix="/catalog",
    tags=["Books"],
    default_response_class=HTMLResponse,
)


async def render_book_form(request: Request, service: BookService, title: str, book=None, errors=None):
    authors, genres = await service.read_form_choices()
    selected = set(book.genre) if book is not None else set()
    return render(
        request,
        "book_form.html",
        {
            "title": title,
            "book": book,
            "authors": authors,
            "genres": genres,
            "selected_genres": selected,
            "errors": errors,
        },
    )


@router.get("")
async def index(request: Request, service: BookService = Depends(get_book_service)):
    counts = await service.count_catalog()
    return render(request, "index.html", {"title": "Local Library Home", **counts})


@router.get("/books")
async def book_list(request: Request, service: BookService = Depends(get_book_service)):
    books = await service.read_all_books()
    return render(request, "book_list.html", {"title": "Book List", "book_list": books})


@router.get("/book/create")
async def book_create_get(request: Request, service: BookService = Depends(get_book_service)):
    return await render_book_form(request, service, "Create Book")


@router.post("/book/create")
async def book_create_post(
    request: Request,
    title: str = Form(""),
    author: Optional[str] = Form(None),
    summary: str = Form(""),
    isbn: str = Form(""),
    genre: List[str] = Form([]),
    service: BookService = Depends(get_book_service),
):
    book, result = validate_book_form(
        {"title": title, "author": author, "summary": summary, "isbn": isbn, "genre": genre}
    )
    if not result.is_empty():
        return await render_book_form(request, service, "Create Book", book, result.errors)
    created = await service.create_book(book)
    return redirect(created.url)


@router.get("/book/{book_id}")
async def book_detail(request: Request, book_id: str, service: BookService = Depends(get_book_service)):
    book, author, genres = await service.read_book_detail(book_id)
    return render(
        request,
        "book_detail.html",
        {"title": book.title, "book": book, "author": author, "genres": genres},
    )


@router.get("/book/{book_id}/delete")
async def book_delete_get(request: Request, book_id: str, service: BookService = Depends(get_book_service)):
    book = await service.books.read_book_by_id(book_id)
    if book is None:
        return redirect(BOOK_LIST_URL)
    return render(request, "book_delete.html", {"title": "Delete Book", "book": book})


@router.post("/book/{book_id}/delete")
async def book_delete_post(book_id: str, service: BookService = Depends(get_book_service)):
    await service.delete_book(book_id)
    return redirect(BOOK_LIST_URL)


@router.get("/book/{book_id}/update")
async def book_update_get(request: Request, book_id: str, service: BookService = Depends(get_book_service)):
    book = await service.read_book(book_id)
    return await render_book_form(request, service, "Update Book", BookCandidate(**book.model_dump()))


@router.post("/book/{book_id}/update")
async def book_update_post(
    request: Request,
    book_id: str,
    title: str = Form(""),
    author: Optional[str] = Form(None),
    summary: str = Form(""),
    isbn: str = Form(""),
    genre: List[str] = Form([]),
    service: BookService = Depends(get_book_service),
):
    book, result = validate_book_form(
        {"title": title, "author": author, "summary": summary, "isbn": isbn, "genre": genre},
        book_id=book_id,
    )
    if not result.is_empty():
        return await render_book_form(request, service, "Update Book", book, result.errors)
    updated = await service.update_book(book_id, book)
    return redirect(updated.url)
