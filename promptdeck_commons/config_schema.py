from pydantic import BaseModel


# Key of the root project collection in the key-value storage.
PROJECTS_STORAGE_KEY = "projects"

# Bounds of the editor / variables panel split, in percent of the width.
SPLIT_RATIO_MIN = 20.0
SPLIT_RATIO_MAX = 80.0
SPLIT_RATIO_DEFAULT = 50.0


class StorageConfigLocal(BaseModel):
    dir_path: str


class StorageConfigMemory(BaseModel):
    """Keeps the state in process memory only. Nothing survives a restart."""


StorageConfig = StorageConfigLocal | StorageConfigMemory | None


class Config(BaseModel):
    storage_config: StorageConfig = None
    storage_key: str = PROJECTS_STORAGE_KEY
