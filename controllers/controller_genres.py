from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from controllers.deps import get_genre_service
from controllers.rendering import redirect, render
from forms.genre_form import validate_genre_form
from services.service_genres import GenreService

GENRE_LIST_URL = "/catalog/genres"

router = APIRouter(
    prefix="/catalog",
    tags=["Genres"],
    default_response_class=HTMLResponse,
)


@router.get("/genres")
async def genre_list(request: Request, service: GenreService = Depends(get_genre_service)):
    genres = await service.read_all_genres()
    return render(request, "genre_list.html", {"title": "Genre List", "genre_list": genres})


@router.get("/genre/create")
async def genre_create_get(request: Request):
    return render(request, "genre_form.html", {"title": "Create Genre"})


@router.post("/genre/create")
async def genre_create_post(
    request: Request,
    name: str = Form(""),
    service: GenreService = Depends(get_genre_service),
):
    genre, result = validate_genre_form({"name": name})
    if not result.is_empty():
        return render(
            request,
            "genre_form.html",
            {"title": "Create Genre", "genre": genre, "errors": result.errors},
        )
    # an existing genre with the same name is returned instead of a new one
    saved, _ = await service.create_genre(genre)
    return redirect(saved.url)


@router.get("/genre/{genre_id}")
async def genre_detail(request: Request, genre_id: str, service: GenreService = Depends(get_genre_service)):
    genre, books = await service.read_genre_detail(genre_id)
    return render(
        request,
        "genre_detail.html",
        {"title": "Genre Detail", "genre": genre, "genre_books": books},
    )


@router.get("/genre/{genre_id}/delete")
async def genre_delete_get(request: Request, genre_id: str, service: GenreService = Depends(get_genre_service)):
    genre, books = await service.read_genre_with_books(genre_id)
    if genre is None:
        return redirect(GENRE_LIST_URL)
    return render(
        request,
        "genre_delete.html",
        {"title": "Delete Genre", "genre": genre, "genre_books": books},
    )


@router.post("/genre/{genre_id}/delete")
async def genre_delete_post(request: Request, genre_id: str, service: GenreService = Depends(get_genre_service)):
    genre, books, deleted = await service.delete_genre(genre_id)
    if genre is not None and not deleted:
        return render(
            request,
            "genre_delete.html",
            {"title": "Delete Genre", "genre": genre, "genre_books": books},
        )
    return redirect(GENRE_LIST_URL)


@router.get("/genre/{genre_id}/update")
async def genre_update_get(request: Request, genre_id: str, service: GenreService = Depends(get_genre_service)):
    genre = await service.read_genre(genre_id)
    return render(request, "genre_form.html", {"title": "Update Genre", "genre": genre})


@router.post("/genre/{genre_id}/update")
async def genre_update_post(
    request: Request,
    genre_id: str,
    name: str = Form(""),
    service: GenreService = Depends(get_genre_service),
):
    genre, result = validate_genre_form({"name": name}, genre_id=genre_id)
    if not result.is_empty():
        return render(
            request,
            "genre_form.html",
            {"title": "Update Genre", "genre": genre, "errors": result.errors},
        )
    updated = await service.update_genre(genre_id, genre)
    return redirect(updated.url)
