import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dishka.integrations.fastapi import setup_dishka as fastapi_setup_dishka
from dishka.integrations.fastapi import FastapiProvider

from .container import ContainerManager
from .depends import provider
from .router import router
from .settings import settings


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def create_fastapi_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title='json-db', docs_url='/docs', openapi_url='/docs.json')

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "PUT"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(router)
    application_providers = [FastapiProvider(), provider]
    container = ContainerManager.create(application_providers)
    fastapi_setup_dishka(container, app)
    return app
