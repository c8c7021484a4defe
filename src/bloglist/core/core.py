from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConnectionFailure

from bloglist.config import Config
from bloglist.errors import StoreUnavailableError

logger = structlog.get_logger(__name__)


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that imports and initializes every service module."""

    from bloglist.core.modules.access.service import AccessService  # noqa: PLC0415
    from bloglist.core.modules.blog.service import BlogService  # noqa: PLC0415
    from bloglist.core.modules.session.service import SessionService  # noqa: PLC0415
    from bloglist.core.modules.user.service import UserService  # noqa: PLC0415

    user: UserService
    blog: BlogService
    session: SessionService
    access: AccessService

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._services: list[Service] = []

        # (attribute_name, module_path, class_name); users first so the unique index exists before anything else
        service_configs = [
            ("user", "bloglist.core.modules.user.service", "UserService"),
            ("blog", "bloglist.core.modules.blog.service", "BlogService"),
            ("session", "bloglist.core.modules.session.service", "SessionService"),
            ("access", "bloglist.core.modules.access.service", "AccessService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, database, and all service instances.

    The MongoDB client is created from `config.database_url` unless one is passed in,
    which lets tests run every service against an isolated in-memory store.
    An injected client is owned by the caller and is not closed on shutdown.
    """

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self.config = config
        self._owns_client = mongo_client is None
        if mongo_client is None:
            mongo_client = AsyncMongoClient(config.database_url, serverSelectionTimeoutMS=config.database_timeout_ms)
        self.mongo_client = mongo_client
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - connect before serving, close on shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        if self._owns_client:
            try:
                await self.database.command("ping")
            except ConnectionFailure as e:
                raise StoreUnavailableError(f"Cannot reach database: {e}") from e
        await self.services.start_all()
        logger.info("core_started", database=self.database.name)

    async def on_stop(self) -> None:
        await self.services.stop_all()
        if self._owns_client:
            await self.mongo_client.aclose()
