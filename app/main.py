"""
Точка входа FastAPI.

lifespan: подключение/отключение MongoDB при старте/остановке.
CORS, exception handlers (структурированные ответы), подключение роутеров
(health, products, pages).
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.database import close_mongo_connection, connect
from app.routers import health, pages, products
from app.schemas.common import ErrorResponse

# Логирование
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл: при старте — подключение к Mongo, при остановке — отключение."""
    logger.info("Starting up: connecting to MongoDB...")
    connect()
    yield
    logger.info("Shutting down: closing MongoDB...")
    close_mongo_connection()


app = FastAPI(
    title="Product Catalog API",
    description="Каталог продуктов: админка, витрина покупателя и CRUD /api/products.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Ошибки MongoDB — 500 с общим сообщением, детали только в лог
@app.exception_handler(PyMongoError)
async def mongo_exception_handler(request: Request, exc: PyMongoError):
    logger.exception("Store error on %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error="server_error", message="Server error")
    return JSONResponse(status_code=500, content=body.model_dump())


# Обработчик неожиданных исключений — структурированный ответ
@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s: %s", request.url.path, exc)
    body = ErrorResponse(error="internal_server_error", message="An unexpected error occurred")
    return JSONResponse(status_code=500, content=body.model_dump())


# Обработчик HTTPException — структурированный ответ
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    detail = exc.detail
    if isinstance(detail, dict) and "error" in detail and "message" in detail:
        body = ErrorResponse(error=detail["error"], message=detail["message"])
    else:
        body = ErrorResponse(error="request_failed", message=str(detail) if detail else "Request failed")
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# Ошибки валидации тела/параметров — 400, как и пропущенные обязательные поля
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = "; ".join(f"{e.get('loc', [])}: {e.get('msg', '')}" for e in errors[:3])
    body = ErrorResponse(error="validation_error", message=msg or "Validation failed")
    return JSONResponse(status_code=400, content=body.model_dump())


# Роутеры
app.include_router(health.router)
app.include_router(products.router)
app.include_router(pages.router)
