from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restoadmin.core.exceptions import ApiError
from restoadmin.core.logger import logger
from restoadmin.db.init_db import init_db
from restoadmin.routers import admin, auth, customer_auth, gate


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def _error_response(request: Request, status_code: int, message: str, headers=None) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content={"error": message}, headers=headers)
    # istek sırasında session temizlendiyse cookie silme işlemi kaybolmasın
    store = getattr(request.state, "session_store", None)
    if store is not None:
        store.apply_to(response)
    return response


def create_app() -> FastAPI:
    app = FastAPI(
        title="Restaurant Admin Backend",
        version="1.0.0",
        lifespan=lifespan
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error(f"API ERROR | path={request.url.path} | status={exc.status_code}")
        return _error_response(request, exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return _error_response(request, 405, "Method not allowed", exc.headers)
        return _error_response(request, exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # body için json_body ile aynı davranış: ilk hata mesajı, 400
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        return _error_response(request, 400, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"UNHANDLED ERROR | path={request.url.path}")
        return _error_response(request, 500, "Internal server error")

    app.include_router(gate.router)
    app.include_router(auth.router)
    app.include_router(customer_auth.router)
    app.include_router(admin.router)

    return app


app = create_app()
