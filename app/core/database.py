"""
Подключение к MongoDB.

Один клиент на процесс. connect() — ленивый get-or-create под локом:
первый вызов создаёт клиент и проверяет его ping-ом, параллельные первые
вызовы ждут ту же попытку, последующие получают закэшированный клиент.
URI только из config (.env).
"""
import logging
import threading

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.config import settings

logger = logging.getLogger(__name__)

_client: MongoClient | None = None
_lock = threading.Lock()


def connect() -> MongoClient:
    """Вернуть клиент MongoDB, при первом вызове подключиться."""
    global _client  # noqa: PLW0603
    if _client is not None:
        return _client
    with _lock:
        # Повторная проверка: пока ждали лок, клиент мог создать другой поток
        if _client is None:
            logger.info("Connecting to MongoDB (db=%s)", settings.MONGO_DB_NAME)
            client = MongoClient(settings.MONGO_URI)
            try:
                client.admin.command("ping")
            except Exception:
                client.close()
                raise
            _client = client
    return _client


def get_client() -> MongoClient:
    """Синоним connect() для роутеров."""
    return connect()


def get_db() -> Database:
    """Вернуть экземпляр БД."""
    return connect()[settings.MONGO_DB_NAME]


def get_products_collection() -> Collection:
    """Коллекция products."""
    return get_db()["products"]


def close_mongo_connection() -> None:
    """Закрыть соединение. Вызывается в lifespan при остановке."""
    global _client
    with _lock:
        if _client:
            _client.close()
            _client = None
