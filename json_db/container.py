from contextlib import asynccontextmanager
from typing import ClassVar, AsyncIterator

from dishka import AsyncContainer, make_async_container, Provider


class ContainerManager:
    container: ClassVar[AsyncContainer | None] = None

    @classmethod
    def create(cls, application_providers: list[Provider]) -> AsyncContainer:
        if cls.container is None:
            cls.container = make_async_container(*application_providers)
        return cls.container

    @classmethod
    async def close(cls) -> None:
        if cls.container is not None:
            await cls.container.close()
            cls.container = None


@asynccontextmanager
async def get_container(
    application_providers: list[Provider] | None = None,
) -> AsyncIterator[AsyncContainer]:
    container = ContainerManager.container
    if container is None:
        if application_providers is None:
            from .depends import provider

            application_providers = [provider]
        container = ContainerManager.create(application_providers=application_providers)
    async with container() as nested_container:
        yield nested_container
