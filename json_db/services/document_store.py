from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass

from json_db.repositories import FileSystemRepository
from .jsonpath_parser import JSONPathParser
from .tree_resolver import JSONValue, TreeResolver

logger = logging.getLogger(__name__)


@dataclass
class DocumentStore:
    """
    Каждый вызов заново читает файл и владеет своей копией дерева.
    Блокировок нет: при параллельной записи в один файл побеждает
    последняя завершившаяся запись, изменения остальных теряются.
    """

    repository: FileSystemRepository
    json_indent: int | None = 2
    encoding: str = 'utf-8'

    async def _read_document(self, file_path: str | os.PathLike[str]) -> JSONValue:
        raw = await self.repository.read_bytes(file_path)
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            # битая кодировка считается тем же повреждённым документом
            raise json.JSONDecodeError(
                f'Invalid {self.encoding} bytes',
                raw.decode(self.encoding, 'replace'),
                e.start,
            ) from e
        return json.loads(text)

    async def load_at(
        self, file_path: str | os.PathLike[str], expression: str = ''
    ) -> JSONValue:
        document = await self._read_document(file_path)
        segments = JSONPathParser.parse_json_path(expression)
        return TreeResolver.read(document, segments)

    async def write_at(
        self, file_path: str | os.PathLike[str], expression: str, value: JSONValue
    ) -> None:
        try:
            document = await self._read_document(file_path)
        except FileNotFoundError:
            logger.info(f'{file_path} does not exist, starting from an empty object')
            document = {}

        segments = JSONPathParser.parse_json_path(expression)
        document = TreeResolver.write(document, segments, value)

        payload = json.dumps(document, indent=self.json_indent, ensure_ascii=False)
        await self.repository.write_bytes(file_path, payload.encode(self.encoding))
