from .file_system import FileSystemRepository

__all__ = ['FileSystemRepository']
