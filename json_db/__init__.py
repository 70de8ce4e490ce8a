from __future__ import annotations

import os

from .exceptions import InvalidPathError
from .repositories import FileSystemRepository
from .services import DocumentStore, JSONValue

__version__ = '0.1.0'

__all__ = [
    'DocumentStore',
    'FileSystemRepository',
    'InvalidPathError',
    'JSONValue',
    'load_at',
    'write_at',
]


async def load_at(file_path: str | os.PathLike[str], expression: str = '') -> JSONValue:
    """Читает документ и возвращает значение по пути ``expression``."""
    return await DocumentStore(repository=FileSystemRepository()).load_at(
        file_path, expression
    )


async def write_at(
    file_path: str | os.PathLike[str], expression: str, value: JSONValue
) -> None:
    """Записывает ``value`` по пути ``expression``, создавая файл при необходимости."""
    await DocumentStore(repository=FileSystemRepository()).write_at(
        file_path, expression, value
    )
