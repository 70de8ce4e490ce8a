import json
from pathlib import PurePosixPath

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, HTTPException, Query, Request
from starlette.responses import JSONResponse, Response

from .exceptions import InvalidPathError
from .services import DocumentStore

router = APIRouter(prefix='/documents', route_class=DishkaRoute)


def _checked_file_path(file_path: str) -> str:
    # документы адресуются только внутри data_dir
    path = PurePosixPath(file_path)
    if not path.parts or path.is_absolute() or '..' in path.parts:
        raise HTTPException(status_code=400, detail='Invalid file path')
    return file_path


@router.get('/{file_path:path}')
async def load_document(
    file_path: str,
    store: FromDishka[DocumentStore],
    path: str = Query('', description='Путь внутри документа, например a.b.c[0]'),
) -> JSONResponse:
    try:
        value = await store.load_at(_checked_file_path(file_path), path)
    except InvalidPathError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail='Document not found')
    except (IsADirectoryError, NotADirectoryError):
        raise HTTPException(status_code=400, detail='Invalid file path')
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=422, detail=f'Malformed document: {e}')
    return JSONResponse(content=value)


@router.put('/{file_path:path}', response_model=None)
async def write_document(
    file_path: str,
    request: Request,
    store: FromDishka[DocumentStore],
    path: str = Query('', description='Путь внутри документа, например a.b.c[0]'),
) -> Response:
    # тело читается напрямую: null тоже допустимое значение
    try:
        value = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=422, detail=f'Malformed body: {e}')

    try:
        await store.write_at(_checked_file_path(file_path), path, value)
    except InvalidPathError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (IsADirectoryError, NotADirectoryError):
        raise HTTPException(status_code=400, detail='Invalid file path')
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=422, detail=f'Malformed document: {e}')
    return Response(status_code=204)
