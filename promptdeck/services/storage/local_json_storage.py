import json
import os
import logging
import re
import threading
from typing import Any, Optional
from promptdeck.services.storage.storage_base import BaseStorage
from promptdeck.services.storage.error import StorageError
from promptdeck_commons.config_schema import StorageConfigLocal
from promptdeck import PROMPTDECK_STORAGE_PATH


logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class LocalJsonStorage(BaseStorage):
    """
    Storage class that keeps every key in its own local json file
    """

    # Class-level lock for atomic operations across all instances
    _lock = threading.Lock()

    def __init__(
        self,
        base_dir: Optional[str] = None,
        config: Optional[StorageConfigLocal] = None,
    ):
        self.config: Optional[StorageConfigLocal] = config
        if self.config:
            base_dir = self.config.dir_path
            if not base_dir:
                err_msg = "Local Json Storage received empty directory"
                logger.error(err_msg)
                raise StorageError(err_msg)
            if not os.path.isabs(base_dir):
                err_msg = f"Local Json Storage received a non absolute path {base_dir}"
                logger.error(err_msg)
                raise StorageError(err_msg)

        if base_dir is None:
            base_dir = PROMPTDECK_STORAGE_PATH
        try:
            if not os.path.exists(base_dir):
                os.makedirs(base_dir, exist_ok=True)
        except OSError:
            err_msg = f"Local Json Storage cannot create directory at {base_dir}"
            logger.error(err_msg)
            raise StorageError(err_msg)
        if not os.path.isdir(base_dir):
            err_msg = f"Local Json Storage specified an invalid directory at {base_dir}"
            logger.error(err_msg)
            raise StorageError(err_msg)
        logger.info("Local Json Storage uses directory %s", base_dir)
        super().__init__(base_dir)

    def file_path(self, key: str) -> str:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key) or "_"
        return os.path.join(self.base_dir, f"{safe_key}.json")

    def load(self, key: str, default: Any = None) -> Any:
        file_path = self.file_path(key)
        with self._lock:
            if not os.path.exists(file_path):
                return default
            try:
                with open(file_path, encoding="utf-8") as file:
                    return json.load(file)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.error("Unreadable JSON stored under key %s: %s", key, e)
                return default
            except OSError as e:
                logger.error("Error reading key %s from %s: %s", key, file_path, e)
                return default

    def save(self, key: str, value: Any) -> bool:
        file_path = self.file_path(key)
        tmp_path = f"{file_path}.tmp"
        with self._lock:
            try:
                with open(tmp_path, "w", encoding="utf-8") as file:
                    json.dump(value, file, ensure_ascii=False, indent=2)
                # the previous file stays intact until the new content is fully written
                os.replace(tmp_path, file_path)
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error("Failed to save key %s to %s: %s", key, file_path, e)
                if os.path.exists(tmp_path):
                    try:
                        os.remove(tmp_path)
                    except OSError:
                        logger.warning("Could not remove temporary file %s", tmp_path)
                return False

    def delete(self, key: str) -> None:
        file_path = self.file_path(key)
        with self._lock:
            try:
                os.remove(file_path)
            except FileNotFoundError:
                logger.debug("Nothing stored under key %s", key)
            except OSError as e:
                logger.error("Failed to delete key %s: %s", key, e)
