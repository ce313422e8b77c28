from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from controllers.deps import get_author_service
from controllers.rendering import redirect, render
from forms.author_form import validate_author_form
from services.service_authors import AuthorService

AUTHOR_LIST_URL = "/catalog/authors"

router = APIRouter(
    prefix="/catalog",
    tags=["Authors"],
    default_response_class=HTMLResponse,
)


@router.get("/authors")
async def author_list(request: Request, service: AuthorService = Depends(get_author_service)):
    authors = await service.read_all_authors()
    return render(request, "author_list.html", {"title": "Author List", "author_list": authors})


@router.get("/author/create")
async def author_create_get(request: Request):
    return render(request, "author_form.html", {"title": "Create Author"})


@router.post("/author/create")
async def author_create_post(
    request: Request,
    first_name: str = Form(""),
    family_name: str = Form(""),
    date_of_birth: Optional[str] = Form(None),
    date_of_death: Optional[str] = Form(None),
    service: AuthorService = Depends(get_author_service),
):
    author, result = validate_author_form(
        {
            "first_name": first_name,
            "family_name": family_name,
            "date_of_birth": date_of_birth,
            "date_of_death": date_of_death,
        }
    )
    if not result.is_empty():
        return render(
            request,
            "author_form.html",
            {"title": "Create Author", "author": author, "errors": result.errors},
        )
    created = await service.create_author(author)
    return redirect(created.url)


@router.get("/author/{author_id}")
async def author_detail(request: Request, author_id: str, service: AuthorService = Depends(get_author_service)):
    author, books = await service.read_author_detail(author_id)
    return render(
        request,
        "author_detail.html",
        {"title": "Author Detail", "author": author, "author_books": books},
    )


@router.get("/author/{author_id}/delete")
async def author_delete_get(request: Request, author_id: str, service: AuthorService = Depends(get_author_service)):
    author, books = await service.read_author_with_books(author_id)
    if author is None:
        return redirect(AUTHOR_LIST_URL)
    return render(
        request,
        "author_delete.html",
        {"title": "Delete Author", "author": author, "author_books": books},
    )


@router.post("/author/{author_id}/delete")
async def author_delete_post(request: Request, author_id: str, service: AuthorService = Depends(get_author_service)):
    author, books, deleted = await service.delete_author(author_id)
    if author is not None and not deleted:
        # still has books, show them like the GET route does
        return render(
            request,
            "author_delete.html",
            {"title": "Delete Author", "author": author, "author_books": books},
        )
    return redirect(AUTHOR_LIST_URL)


@router.get("/author/{author_id}/update")
async def author_update_get(request: Request, author_id: str, service: AuthorService = Depends(get_author_service)):
    author = await service.read_author(author_id)
    return render(request, "author_form.html", {"title": "Update Author", "author": author})


@router.post("/author/{author_id}/update")
async def author_update_post(
    request: Request,
    author_id: str,
    first_name: str = Form(""),
    family_name: str = Form(""),
    date_of_birth: Optional[str] = Form(None),
    date_of_death: Optional[str] = Form(None),
    service: AuthorService = Depends(get_author_service),
):
    author, result = validate_author_form(
        {
            "first_name": first_name,
            "family_name": family_name,
            "date_of_birth": date_of_birth,
            "date_of_death": date_of_death,
        },
        author_id=author_id,
    )
    if not result.is_empty():
        return render(
            request,
            "author_form.html",
            {"title": "Update Author", "author": author, "errors": result.errors},
        )
    updated = await service.update_author(author_id, author)
    return redirect(updated.url)
