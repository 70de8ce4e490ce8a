from dataclasses import dataclass
import re

from json_db.exceptions import InvalidPathError


@dataclass(frozen=True)
class KeySegment:
    name: str


@dataclass(frozen=True)
class IndexSegment:
    index: int


PathSegment = KeySegment | IndexSegment


class JSONPathParser:
    _part_re = re.compile(r'([^.\[\]]*)((?:\[[0-9]+\])*)')
    _index_re = re.compile(r'\[([0-9]+)\]')

    @staticmethod
    def parse_json_path(json_path: str) -> list[PathSegment]:
        """
        Разбирает путь вида a.b.c_array[0][1]:
        - части разделены точкой
        - у каждой части необязательное имя и любое число индексов [N]
        - пустая строка означает весь документ
        """
        if not json_path:
            return []

        segments: list[PathSegment] = []

        for raw in json_path.split('.'):
            m = JSONPathParser._part_re.fullmatch(raw)
            if not m:
                raise InvalidPathError()

            name, indexes = m.group(1), m.group(2)
            if name:
                segments.append(KeySegment(name=name))
            segments.extend(
                IndexSegment(index=int(digits))
                for digits in JSONPathParser._index_re.findall(indexes)
            )

        return segments
