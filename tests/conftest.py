import json
from pathlib import Path

import pytest

from json_db.settings import settings

pytest_plugins = ('tests.fixtures.container',)


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch) -> Path:
    # все документы тестов живут во временной директории
    monkeypatch.setattr(settings.storage, 'data_dir', tmp_path)
    return tmp_path


@pytest.fixture
def sample_document():
    return {
        'a': {
            'b': {
                'c': 'it works!',
                'c_array': ['x', 'y', 'z'],
            }
        }
    }


@pytest.fixture
def sample_file(data_dir, sample_document) -> Path:
    path = data_dir / 'temp.json'
    path.write_text(json.dumps(sample_document), encoding='utf-8')
    return path


@pytest.fixture
def write_file(data_dir) -> Path:
    path = data_dir / 'temp_write.json'
    path.write_text(json.dumps({'a': {'b': {}}}), encoding='utf-8')
    return path
