from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from config import settings

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def render(request: Request, name: str, context: dict, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
