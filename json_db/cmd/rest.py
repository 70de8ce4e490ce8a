from json_db.bootstrap import create_fastapi_app
from json_db.container import ContainerManager

app = create_fastapi_app()


@app.on_event('shutdown')
async def _shutdown() -> None:
    await ContainerManager.close()
