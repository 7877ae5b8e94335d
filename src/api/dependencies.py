from typing import AsyncIterator

from fastapi import Depends
from src.clients.completion import CompletionClient
from src.clients.conversion import ConversionClient
from src.core.config import get_settings, Settings


def get_settings_dependency() -> Settings:
    return get_settings()


async def get_completion_client(
    settings: Settings = Depends(get_settings_dependency),
) -> AsyncIterator[CompletionClient]:
    async with CompletionClient(**settings.completion_config) as client:
        yield client


async def get_conversion_client(
    settings: Settings = Depends(get_settings_dependency),
) -> AsyncIterator[ConversionClient]:
    async with ConversionClient(**settings.conversion_config) as client:
        yield client
