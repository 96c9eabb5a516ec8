from typing import Optional
import logging

from promptdeck_commons.config_schema import (
    Config,
    StorageConfig,
    StorageConfigLocal,
    StorageConfigMemory,
)
from promptdeck import PROMPTDECK_STORAGE_KEY
from promptdeck.services.storage.storage_base import BaseStorage
from promptdeck.services.storage.local_json_storage import LocalJsonStorage
from promptdeck.services.storage.memory_storage import MemoryStorage

logger = logging.getLogger(__name__)


class SimpleConfigurator:
    def __init__(self, config: Optional[Config] = None, base_dir: Optional[str] = None):
        self.base_dir = base_dir
        self.config = config or Config(storage_key=PROMPTDECK_STORAGE_KEY)

    # ==============================
    # Configuration
    # ==============================

    def get_config(self) -> Config:
        return self.config

    def get_storage_key(self) -> str:
        return self.get_config().storage_key

    # ==============================
    # Storage
    # ==============================

    def get_current_storage_configuration(self) -> StorageConfig:
        """
        This routine returns the currently configured storage config.
        """
        return self.get_config().storage_config

    def create_storage(
        self, storage_config: Optional[StorageConfig] = None
    ) -> BaseStorage:
        """
        This routine creates a storage based on the given storage config type.
        Without any storage config, a local json storage is created under ``base_dir``
        (or the PROMPTDECK_STORAGE_PATH directory).
        """
        if storage_config is None:
            storage_config = self.get_current_storage_configuration()

        storage: BaseStorage
        if isinstance(storage_config, StorageConfigLocal):
            logger.info("Using local storage at %s", storage_config.dir_path)
            storage = LocalJsonStorage(config=storage_config)
        elif isinstance(storage_config, StorageConfigMemory):
            logger.info("Using in-memory storage")
            storage = MemoryStorage()
        elif storage_config is None:
            logger.info("No storage configured, using default local storage")
            storage = LocalJsonStorage(base_dir=self.base_dir)
        else:
            raise ValueError(f"Invalid storage config type: {type(storage_config)}")

        return storage
