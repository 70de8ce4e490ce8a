from dishka import Provider, Scope, provide
from .repositories import FileSystemRepository
from .services import DocumentStore
from .settings import settings


class StorageProvider(Provider):
    scope = Scope.REQUEST

    @provide(scope=Scope.REQUEST)
    def get_file_system(self) -> FileSystemRepository:
        return FileSystemRepository(base_dir=settings.storage.data_dir)

    @provide(scope=Scope.REQUEST)
    def get_document_store(self, repository: FileSystemRepository) -> DocumentStore:
        return DocumentStore(
            repository=repository,
            json_indent=settings.storage.json_indent,
            encoding=settings.storage.encoding,
        )


provider = StorageProvider()
