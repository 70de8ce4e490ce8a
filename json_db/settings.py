from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettingsSchema(BaseModel):
    data_dir: Path = Path('data')
    json_indent: int | None = 2
    encoding: str = 'utf-8'


class SettingsSchema(BaseSettings):
    storage: StorageSettingsSchema = StorageSettingsSchema()
    log_level: str = 'INFO'
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__',
        case_sensitive=False,
        extra='ignore',
    )


settings = SettingsSchema()
