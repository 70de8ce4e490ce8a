from typing import Any

from json_db.exceptions import InvalidPathError
from .jsonpath_parser import KeySegment, PathSegment

JSONValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class TreeResolver:
    @staticmethod
    def _step(current: JSONValue, segment: PathSegment) -> JSONValue:
        if isinstance(segment, KeySegment):
            if isinstance(current, dict) and segment.name in current:
                return current[segment.name]
            raise InvalidPathError()

        if isinstance(current, list) and 0 <= segment.index < len(current):
            return current[segment.index]
        raise InvalidPathError()

    @staticmethod
    def read(root: JSONValue, segments: list[PathSegment]) -> JSONValue:
        current = root
        for segment in segments:
            current = TreeResolver._step(current, segment)
        return current

    @staticmethod
    def _walk_creating(root: JSONValue, segments: list[PathSegment]) -> JSONValue:
        """
        Проходит по сегментам, создавая недостающие словари по ключам.
        Списки не создаются и не расширяются, существующие значения
        не перезаписываются.
        """
        current = root
        for segment in segments:
            if isinstance(segment, KeySegment):
                if not isinstance(current, dict):
                    raise InvalidPathError()
                current = current.setdefault(segment.name, {})
            else:
                current = TreeResolver._step(current, segment)
        return current

    @staticmethod
    def _assign(container: JSONValue, segment: PathSegment, value: JSONValue) -> None:
        if isinstance(segment, KeySegment):
            if not isinstance(container, dict):
                raise InvalidPathError()
            container[segment.name] = value
            return

        if not isinstance(container, list) or not 0 <= segment.index < len(container):
            raise InvalidPathError()
        container[segment.index] = value

    @staticmethod
    def write(
        root: JSONValue, segments: list[PathSegment], value: JSONValue
    ) -> JSONValue:
        if not segments:
            return value

        container = TreeResolver._walk_creating(root, segments[:-1])
        TreeResolver._assign(container, segments[-1], value)
        return root
