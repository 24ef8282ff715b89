"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator

from ims.application.password_hasher import PasswordHasher
from ims.infrastructure.config import Settings
from ims.infrastructure.persistence import database
from ims.infrastructure.persistence.sql_client_repository import SqlClientRepository
from ims.infrastructure.persistence.sql_product_repository import SqlProductRepository
from ims.infrastructure.persistence.sql_stock_history_repository import (
    SqlStockHistoryRepository,
)
from ims.infrastructure.persistence.sql_user_repository import SqlUserRepository
from ims.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from ims.logging_config import configure_logging


@dataclass(frozen=True)
class Repositories:
    """Every repository, bound to one session."""

    products: SqlProductRepository
    clients: SqlClientRepository
    stock_history: SqlStockHistoryRepository
    users: SqlUserRepository


_settings: Settings | None = None


def settings() -> Settings:
    """Load settings once, configure logging and open the database."""
    global _settings
    if _settings is None:
        loaded = Settings.from_env()
        configure_logging(level=loaded.log_level)
        database.init_engine_from_url(loaded.database_url)
        database.create_tables()
        _settings = loaded
    return _settings


def password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


@contextmanager
def unit_of_work() -> Generator[Repositories, None, None]:
    """Repositories sharing one transaction (commit on success)."""
    settings()
    with database.session_scope() as session:
        yield Repositories(
            products=SqlProductRepository(session),
            clients=SqlClientRepository(session),
            stock_history=SqlStockHistoryRepository(session),
            users=SqlUserRepository(session),
        )


def reset() -> None:
    """Forget loaded settings and dispose of the engine. FOR TESTING ONLY."""
    global _settings
    _settings = None
    database.reset_engine()
