from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from config import settings
from controllers.controller_authors import router as authors_router
from controllers.controller_books import router as books_router
from controllers.controller_genres import router as genres_router
from controllers.rendering import redirect, render
from db.gateway import DocumentGateway
from db.sqlite_gateway import SqliteDictGateway


def create_app(gateway: DocumentGateway | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if gateway is not None:
            yield
            return
        app.state.gateway = SqliteDictGateway(settings.DB_PATH)
        logger.info(f"Catalog database opened at {settings.DB_PATH}")
        try:
            yield
        finally:
            app.state.gateway.close()

    app = FastAPI(title="Local Library", lifespan=lifespan)
    if gateway is not None:
        app.state.gateway = gateway

    app.include_router(books_router)
    app.include_router(authors_router)
    app.include_router(genres_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        return redirect("/catalog")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} ---> {exc.status_code}: {exc.detail}")
        return render(
            request,
            "error.html",
            {"title": "Error", "message": exc.detail, "status_code": exc.status_code},
            status_code=exc.status_code,
        )

    # caught here so the error is logged once and not re-raised to the server
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
            return render(
                request,
                "error.html",
                {"title": "Error", "message": "Internal server error", "status_code": 500},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return app


app = create_app()

if __name__ == "__main__":
    logger.add(settings.LOG_FILE, retention=settings.LOG_RETENTION)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
