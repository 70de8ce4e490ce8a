from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


@dataclass
class FileSystemRepository:
    base_dir: Path = field(default_factory=Path.cwd)

    def resolve(self, file_path: str | os.PathLike[str]) -> Path:
        # абсолютный путь при склейке заменяет base_dir целиком
        return Path(self.base_dir) / file_path

    async def read_bytes(self, file_path: str | os.PathLike[str]) -> bytes:
        path = self.resolve(file_path)
        logger.debug(f'Reading {path}')
        async with aiofiles.open(path, 'rb') as f:
            return await f.read()

    async def write_bytes(self, file_path: str | os.PathLike[str], data: bytes) -> None:
        path = self.resolve(file_path)
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        logger.debug(f'Writing {len(data)} bytes to {path}')
        async with aiofiles.open(path, 'wb') as f:
            await f.write(data)
