import pytest

from json_db.repositories import FileSystemRepository


@pytest.mark.asyncio
async def test_read_and_write_bytes(file_system_repo: FileSystemRepository, data_dir):
    await file_system_repo.write_bytes('doc.json', b'{"a": 1}')

    assert (data_dir / 'doc.json').read_bytes() == b'{"a": 1}'
    assert await file_system_repo.read_bytes('doc.json') == b'{"a": 1}'


@pytest.mark.asyncio
async def test_write_replaces_previous_content(file_system_repo: FileSystemRepository, data_dir):
    await file_system_repo.write_bytes('doc.json', b'{"long": "previous content"}')
    await file_system_repo.write_bytes('doc.json', b'{}')

    assert (data_dir / 'doc.json').read_bytes() == b'{}'


@pytest.mark.asyncio
async def test_write_creates_parent_directories(file_system_repo: FileSystemRepository, data_dir):
    await file_system_repo.write_bytes('a/b/c/doc.json', b'[]')

    assert (data_dir / 'a' / 'b' / 'c' / 'doc.json').read_bytes() == b'[]'


@pytest.mark.asyncio
async def test_absolute_path_ignores_base_dir(tmp_path):
    repo = FileSystemRepository(base_dir=tmp_path / 'unused')
    target = tmp_path / 'absolute.json'

    await repo.write_bytes(target, b'1')

    assert target.read_bytes() == b'1'
    assert not (tmp_path / 'unused').exists()


@pytest.mark.asyncio
async def test_read_missing_file(file_system_repo: FileSystemRepository):
    with pytest.raises(FileNotFoundError):
        await file_system_repo.read_bytes('missing.json')
